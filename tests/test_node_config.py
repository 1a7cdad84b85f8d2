import pytest

from borkit.node_config import BorNetwork, BorNodeConfig


def test_mainnet_config():
    config = BorNodeConfig.mainnet()
    assert config.chain_id() == 137
    assert config.network is BorNetwork.MAINNET


def test_amoy_config():
    config = BorNodeConfig.amoy()
    assert config.chain_id() == 80002
    assert config.network is BorNetwork.AMOY


def test_default_directories_and_ports():
    mainnet = BorNodeConfig.mainnet()
    amoy = BorNodeConfig.amoy()
    assert mainnet.data_dir == "~/.boreth"
    assert amoy.data_dir == "~/.boreth-amoy"
    assert mainnet.rpc_addr == "127.0.0.1"
    assert (mainnet.rpc_port, mainnet.p2p_port) == (8545, 30303)
    assert (amoy.rpc_port, amoy.p2p_port) == (8545, 30303)


def test_chain_id_follows_network():
    config = BorNodeConfig.mainnet()
    config.network = BorNetwork.AMOY
    assert config.chain_id() == BorNodeConfig.amoy().chain_id()


def test_invalid_heimdall_url_rejected():
    with pytest.raises(ValueError):
        BorNodeConfig(network=BorNetwork.MAINNET, heimdall_url="not a url", data_dir="/tmp/x")


def test_port_out_of_range_rejected():
    with pytest.raises(ValueError):
        BorNodeConfig(
            network=BorNetwork.AMOY,
            heimdall_url="http://localhost:1317",
            data_dir="/tmp/x",
            rpc_port=70000,
        )