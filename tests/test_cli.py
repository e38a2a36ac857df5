import logging

import pytest

from gelato_tasks import config
from gelato_tasks.cli import build_parser, main
from gelato_tasks.tasks import gelato_providers

from constants import TX_HASH


def test_bre_config_contracts(capsys):
    assert main(["bre-config", "--contracts"]) == 0
    out = capsys.readouterr().out
    assert "GelatoCore" in out
    assert "ScriptExitRebalancePortfolioRinkeby" in out


def test_network_after_task_name(capsys):
    assert main(["bre-config", "--contracts", "--network", "kovan"]) == 0
    assert "MockActionChainedDummy" in capsys.readouterr().out


def test_address_book_entry_prints_literal(capsys):
    assert main(["bre-config", "--addressbookcategory", "gelatoProvider", "--addressbookentry", "default"]) == 0
    assert capsys.readouterr().out.strip().endswith("0x518eAa8f962246bCe2FA49329Fe998B66d67cbf8")


def test_abi_encode_from_cli(capsys):
    argv = [
        "abi-encode-withselector",
        "--contractname", "GelatoCore",
        "--functionname", "provideFunds",
        "--inputs", '["0x70997970C51812dc3A010C7d01b50e0d17dc79C8"]',
    ]
    assert main(argv) == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert out[-1].startswith("0x")
    assert len(out[-1]) == 2 + 8 + 64


def test_missing_config_key_exits_nonzero(capsys):
    assert main(["--network", "kovan", "bre-config", "--addressbookcategory", "kyber"]) == 1
    assert "bre-config failed" in capsys.readouterr().out


def test_write_task_without_signer_exits_nonzero():
    assert main(["gc-multiprovide", "--funds", "0.1"]) == 1


def test_unknown_network_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["--network", "mainnet", "bre-config", "--contracts"])
    assert excinfo.value.code == 2


def test_parser_defaults():
    args = build_parser().parse_args(["gc-multiprovide"])
    assert args.network == "rinkeby"
    assert args.funds == "0"
    assert args.providerindex == 2
    assert args.taskspecs == []
    assert args.events is False


def test_parser_json_params():
    args = build_parser().parse_args(["gc-multiprovide", "--modules", '["0x0000000000000000000000000000000000000001"]'])
    assert args.modules == ["0x0000000000000000000000000000000000000001"]


@pytest.fixture
def offline(monkeypatch, mock_web3):
    monkeypatch.setattr(gelato_providers, "connect", lambda network: mock_web3)
    return mock_web3


def test_reverted_transaction_exits_nonzero(overlay, mnemonic, offline, capsys):
    offline.eth.wait_for_transaction_receipt.return_value = {"status": 0, "blockNumber": 42}

    assert main(["gc-multiprovide", "--funds", "0.1"]) == 1
    assert f"gc-multiprovide failed: transaction {TX_HASH} reverted" in capsys.readouterr().out


def test_declined_confirmation_exits_nonzero(overlay, mnemonic, offline, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "n")

    assert main(["gc-providefunds", "--funds", "1", "--confirm"]) == 1
    assert "gc-providefunds failed: transaction not sent" in capsys.readouterr().out
    offline.eth.send_raw_transaction.assert_not_called()


def test_invalid_log_level_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["--log-level", "verbose", "bre-config", "--contracts"])
    assert excinfo.value.code == 2


def test_invalid_log_level_from_env_is_usage_error(monkeypatch):
    monkeypatch.setattr(config, "LOG_LEVEL", "verbose")
    with pytest.raises(SystemExit) as excinfo:
        main(["bre-config", "--contracts"])
    assert excinfo.value.code == 2


def test_log_level_is_case_insensitive():
    assert main(["--log-level", "debug", "bre-config", "--contracts"]) == 0
    assert logging.getLogger("gelato_tasks").level == logging.DEBUG
