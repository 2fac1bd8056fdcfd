"""Unit tests for bgnode.clients."""

from pathlib import Path

import pytest

from bgnode.clients import build_launch_spec
from bgnode.models import ClientSelection, NodeConfig, Role

SECRET = Path("/home/user/bgnode/jwt/jwt.hex")


@pytest.fixture
def config(tmp_path):
    return NodeConfig(home=tmp_path)


def _spec(config, role, name, platform="linux"):
    return build_launch_spec(ClientSelection(role, name), SECRET, config, platform)


class TestArguments:
    def test_geth_arguments(self, config):
        spec = _spec(config, Role.EXECUTION, "geth")
        assert spec.argv == (
            "--mainnet",
            "--http",
            "--http.api",
            "eth,net,engine,admin",
            "--http.addr",
            "0.0.0.0",
            "--syncmode",
            "full",
            "--authrpc.jwtsecret",
            str(SECRET),
        )

    def test_reth_arguments(self, config):
        spec = _spec(config, Role.EXECUTION, "reth")
        assert spec.argv == (
            "node",
            "--full",
            "--http",
            "--authrpc.addr",
            "127.0.0.1",
            "--authrpc.port",
            "8551",
            "--authrpc.jwtsecret",
            str(SECRET),
        )

    def test_prysm_arguments(self, config):
        spec = _spec(config, Role.CONSENSUS, "prysm")
        assert spec.argv == (
            "beacon-chain",
            "--execution-endpoint",
            "http://localhost:8551",
            "--mainnet",
            "--jwt-secret",
            str(SECRET),
        )

    def test_lighthouse_arguments(self, config):
        spec = _spec(config, Role.CONSENSUS, "lighthouse")
        assert spec.argv == (
            "bn",
            "--network",
            "mainnet",
            "--execution-endpoint",
            "http://localhost:8551",
            "--execution-jwt",
            str(SECRET),
            "--checkpoint-sync-url",
            "https://mainnet.checkpoint.sigp.io",
            "--disable-deposit-contract-sync",
        )


class TestDeterminism:
    @pytest.mark.parametrize("platform", ["linux", "darwin", "win32"])
    @pytest.mark.parametrize(
        "role, name",
        [
            (Role.EXECUTION, "geth"),
            (Role.EXECUTION, "reth"),
            (Role.CONSENSUS, "prysm"),
            (Role.CONSENSUS, "lighthouse"),
        ],
    )
    def test_same_inputs_same_spec(self, config, role, name, platform):
        assert _spec(config, role, name, platform) == _spec(config, role, name, platform)

    def test_spec_carries_role_and_name(self, config):
        spec = _spec(config, Role.CONSENSUS, "lighthouse")
        assert spec.role is Role.CONSENSUS
        assert spec.name == "lighthouse"
        assert spec.command[0] == "lighthouse"


class TestExecutables:
    def test_brew_clients_resolve_through_path(self, config):
        assert _spec(config, Role.EXECUTION, "geth").executable == "geth"
        assert _spec(config, Role.EXECUTION, "reth", "darwin").executable == "reth"

    def test_prysm_script_on_posix(self, config, tmp_path):
        spec = _spec(config, Role.CONSENSUS, "prysm")
        assert spec.executable == str(tmp_path / "prysm" / "prysm.sh")

    def test_windows_binaries_live_under_home(self, config, tmp_path):
        assert _spec(config, Role.EXECUTION, "geth", "win32").executable == str(
            tmp_path / "geth" / "geth.exe"
        )
        assert _spec(config, Role.CONSENSUS, "lighthouse", "win32").executable == str(
            tmp_path / "lighthouse" / "lighthouse.exe"
        )

    def test_prysm_batch_script_on_windows(self, config, tmp_path):
        spec = _spec(config, Role.CONSENSUS, "prysm", "win32")
        assert spec.executable == str(tmp_path / "prysm" / "prysm.bat")
