from __future__ import annotations

import logging
import subprocess
from unittest.mock import MagicMock, patch

import pytest

from models.strategy import Operation
from services.command_runner import CommandRunner
from services.container_command_builder import ContainerCommandBuilder
from services.errors import ExternalCommandError
from services.execution import CommandExecutionService, ExecutionResult


def test_exec_command_targets_service_without_tty() -> None:
    builder = ContainerCommandBuilder()

    assert builder.build_exec_command("setup:upgrade") == [
        "docker-compose", "exec", "-T", "fpm", "bin/magento", "setup:upgrade",
    ]


def test_compose_plugin_and_custom_service() -> None:
    builder = ContainerCommandBuilder(compose_command="docker compose", service="php", cli="php bin/magento")

    assert builder.build_exec_command("cache:flush") == [
        "docker", "compose", "exec", "-T", "php", "php", "bin/magento", "cache:flush",
    ]


def test_success_returns_output_and_echoes_it(capsys, caplog) -> None:
    executor = MagicMock()
    executor.execute_locally.return_value = ExecutionResult(returncode=0, output="Flushed cache types\n")
    runner = CommandRunner(ContainerCommandBuilder(), executor)

    with caplog.at_level(logging.INFO):
        output = runner.run(Operation.CACHE_FLUSH)

    assert output == "Flushed cache types\n"
    assert capsys.readouterr().out == "Flushed cache types\n"
    assert "Running: docker-compose exec -T fpm bin/magento cache:flush" in caplog.text
    executor.execute_locally.assert_called_once_with(
        ["docker-compose", "exec", "-T", "fpm", "bin/magento", "cache:flush"]
    )


def test_non_zero_exit_raises_with_output(capsys) -> None:
    executor = MagicMock()
    executor.execute_locally.return_value = ExecutionResult(returncode=1, output="Area code is not set\n")
    runner = CommandRunner(ContainerCommandBuilder(), executor)

    with pytest.raises(ExternalCommandError) as excinfo:
        runner.run(Operation.DI_COMPILE)

    error = excinfo.value
    assert error.operation == "setup:di:compile"
    assert error.returncode == 1
    assert error.output == "Area code is not set\n"
    assert "docker-compose exec -T fpm bin/magento setup:di:compile" in str(error)
    assert capsys.readouterr().out == "Area code is not set\n"


def test_start_failure_raises_with_cause() -> None:
    executor = MagicMock()
    executor.execute_locally.return_value = ExecutionResult.start_failure(
        FileNotFoundError(2, "No such file or directory", "docker-compose")
    )
    runner = CommandRunner(ContainerCommandBuilder(), executor)

    with pytest.raises(ExternalCommandError) as excinfo:
        runner.run(Operation.REINDEX)

    assert excinfo.value.cause is not None
    assert "failed to start" in str(excinfo.value)


@patch("services.execution.subprocess.run")
def test_execution_merges_stderr_and_sets_no_timeout(mock_run: MagicMock) -> None:
    mock_run.return_value = subprocess.CompletedProcess(args=["x"], returncode=3, stdout="out and err")

    result = CommandExecutionService(working_directory="/srv/shop").execute_locally(["x"])

    assert result.returncode == 3
    assert result.output == "out and err"
    assert not result.success
    kwargs = mock_run.call_args.kwargs
    assert kwargs["stderr"] is subprocess.STDOUT
    assert kwargs["cwd"] == "/srv/shop"
    assert "timeout" not in kwargs


@patch("services.execution.subprocess.run", side_effect=FileNotFoundError("docker-compose"))
def test_execution_reports_missing_binary(_mock_run: MagicMock) -> None:
    result = CommandExecutionService().execute_locally(["docker-compose"])

    assert result.returncode == -1
    assert result.error == "docker-compose"
    assert not result.success


def test_error_message_quotes_command_for_the_shell() -> None:
    executor = MagicMock()
    executor.execute_locally.return_value = ExecutionResult(returncode=2)
    builder = ContainerCommandBuilder(service="php fpm", cli="'/var/www/my shop/bin/magento'")
    runner = CommandRunner(builder, executor)

    with pytest.raises(ExternalCommandError) as excinfo:
        runner.run(Operation.SETUP_UPGRADE)

    assert "docker-compose exec -T 'php fpm' '/var/www/my shop/bin/magento' setup:upgrade" in str(excinfo.value)
