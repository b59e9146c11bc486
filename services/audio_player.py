"""
Ambient audio player
Loops an MP3 through an external player while the strategies run
"""
import atexit
import logging
import shlex
import subprocess
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)


class AmbientAudioPlayer:
    """Fire-and-forget background playback; never raises, never blocks exit"""

    def __init__(self, audio_file: Path, player_command: str = 'mpg123 --loop -1 -q'):
        self.audio_file = Path(audio_file)
        self.player_command = shlex.split(player_command)
        self._process: Optional[subprocess.Popen] = None

    def build_command(self) -> List[str]:
        return self.player_command + [str(self.audio_file)]

    def start(self) -> bool:
        """Start playback in the background, returning whether a player was launched"""
        if not self.audio_file.is_file():
            logger.warning('🙁 Failed to play audio: Could not open audio file "%s"', self.audio_file)
            return False

        try:
            self._process = subprocess.Popen(
                self.build_command(),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True
            )
        except (OSError, ValueError) as e:
            logger.warning("🙁 Failed to play audio: %s", e)
            return False

        # Stop the loop when we exit, without waiting on the player
        atexit.register(self.stop)
        return True

    def stop(self):
        if self._process is None or self._process.poll() is not None:
            return
        try:
            self._process.terminate()
        except OSError as e:
            logger.debug("Could not stop audio player: %s", e)
