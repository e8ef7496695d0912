from soltrade.constants.trade import (
    DEFAULT_BUY_TIP_FEE,
    DEFAULT_RPC_UNIT_LIMIT,
    DEFAULT_RPC_UNIT_PRICE,
    DEFAULT_SELL_TIP_FEE,
    DEFAULT_TIP_UNIT_LIMIT,
    DEFAULT_TIP_UNIT_PRICE,
)
from soltrade.pubkey import Pubkey
from soltrade.types import Commitment, PriorityFee, TradeConfig


def test_priority_fee_defaults_follow_trade_constants():
    fee = PriorityFee()
    assert fee.tip_unit_limit == DEFAULT_TIP_UNIT_LIMIT
    assert fee.tip_unit_price == DEFAULT_TIP_UNIT_PRICE
    assert fee.rpc_unit_limit == DEFAULT_RPC_UNIT_LIMIT
    assert fee.rpc_unit_price == DEFAULT_RPC_UNIT_PRICE
    assert fee.buy_tip_fee == DEFAULT_BUY_TIP_FEE
    assert fee.sell_tip_fee == DEFAULT_SELL_TIP_FEE
    assert fee.smart_buy_tip_fee == 0.0
    assert fee.buy_tip_fees == []


def test_priority_fee_lists_are_not_shared():
    first = PriorityFee()
    second = PriorityFee()
    first.buy_tip_fees.append(0.01)
    assert second.buy_tip_fees == []


def test_priority_fee_equality():
    assert PriorityFee() == PriorityFee()
    assert PriorityFee(sell_tip_fee=0.5) != PriorityFee()
    assert PriorityFee(sell_tip_fee=0.5).sell_tip_fee == 0.5


def test_commitment_values():
    assert Commitment("confirmed") is Commitment.CONFIRMED
    assert Commitment.FINALIZED.value == "finalized"
    assert Commitment.PROCESSED.value == "processed"


def test_trade_config_defaults():
    config = TradeConfig("http://localhost:8899", [])
    assert config.rpc_url == "http://localhost:8899"
    assert config.swqos_configs == []
    assert config.priority_fee == PriorityFee()
    assert config.commitment is Commitment.CONFIRMED
    assert config.lookup_table_key is None


def test_trade_config_keeps_given_values():
    key = Pubkey.default()
    fee = PriorityFee(buy_tip_fee=0.002)
    config = TradeConfig(
        rpc_url="http://localhost:8899",
        swqos_configs=["default"],
        priority_fee=fee,
        commitment=Commitment.FINALIZED,
        lookup_table_key=key,
    )
    assert config.priority_fee.buy_tip_fee == 0.002
    assert config.commitment is Commitment.FINALIZED
    assert config.lookup_table_key == key
    assert config.swqos_configs == ["default"]