"""
Container command builder for maintenance operations
Builds docker-compose exec commands that run bin/magento inside the application service
"""
from typing import List
import shlex


class ContainerCommandBuilder:
    """Builds container exec commands for a compose service"""

    def __init__(
        self,
        compose_command: str = 'docker-compose',
        service: str = 'fpm',
        cli: str = 'bin/magento'
    ):
        # `docker compose` (plugin) and `docker-compose` (standalone) are both accepted
        self.compose_command = shlex.split(compose_command)
        self.service = service
        self.cli = shlex.split(cli)

    def build_exec_command(self, operation: str) -> List[str]:
        """Build complete exec command for one maintenance operation"""
        cmd = list(self.compose_command)

        # -T: no TTY allocation, output is captured
        cmd.extend(['exec', '-T', self.service])

        cmd.extend(self.cli)
        cmd.append(operation)

        return cmd

    @staticmethod
    def render(command: List[str]) -> str:
        """Render command for display, quoted so it can be pasted into a shell"""
        return shlex.join(command)
