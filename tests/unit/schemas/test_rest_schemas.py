"""Block, log, gas tracker, stats and transaction-status schemas."""

from decimal import Decimal

import pytest

from etherscan_api.exceptions import ValidationError
from etherscan_api.schemas import block, gas_tracker, logs, stats, transaction
from etherscan_api.schemas.base import validate
from fakes import ADDRESS, TX_HASH


class TestBlockSchemas:
    def test_block_reward(self):
        reward = validate(
            block.BlockRewardResult,
            {
                "blockNumber": "2165403",
                "timeStamp": "1472533979",
                "blockMiner": ADDRESS.lower(),
                "blockReward": "5314181600000000000",
                "uncles": [
                    {"miner": ADDRESS.lower(), "unclePosition": "0", "blockreward": "3750000000000000000"},
                ],
                "uncleInclusionReward": "312500000000000000",
            },
        )
        assert reward.block_miner == ADDRESS
        assert reward.uncles[0].block_reward == 3_750_000_000_000_000_000
        assert reward.uncles[0].uncle_position == 0

    @pytest.mark.parametrize(
        ("remaining_key", "time_key"),
        [("RemainingBlock", "EstimateTimeInSec"), ("ReamingBlock", "EstimatedTimeInSec")],
    )
    def test_countdown_accepts_both_spellings(self, remaining_key, time_key):
        countdown = validate(
            block.BlockCountdownResult,
            {"CurrentBlock": "12715477", "CountdownBlock": "16701588", remaining_key: "3986111", time_key: "52616.5"},
        )
        assert countdown.remaining_block == 3986111
        assert countdown.estimated_time_ms == 52_616_500

    @pytest.mark.parametrize(("seconds", "expected_ms"), [(52.5, 52_500), (60, 60_000)])
    def test_countdown_accepts_numeric_estimate(self, seconds, expected_ms):
        countdown = validate(
            block.BlockCountdownResult,
            {"CurrentBlock": "1", "CountdownBlock": "2", "RemainingBlock": "1", "EstimateTimeInSec": seconds},
        )
        assert countdown.estimated_time_ms == expected_ms

    def test_models_accept_field_names(self):
        by_alias = block.UncleReward.model_validate({"miner": ADDRESS, "unclePosition": "1", "blockreward": "7"})
        by_name = block.UncleReward(miner=ADDRESS, uncle_position="1", block_reward="7")
        assert by_name == by_alias

    def test_block_number(self):
        assert validate(block.BlockNumberResult, "12712551") == 12712551


class TestEventLog:
    def test_hex_numbers_with_empty_zero(self):
        [log] = validate(
            logs.EventLogList,
            [
                {
                    "address": ADDRESS.lower(),
                    "topics": ["0x" + "ef" * 32],
                    "data": "0x",
                    "blockNumber": "0xc48174",
                    "timeStamp": "0x60cdd8f7",
                    "gasPrice": "0x2e90edd000",
                    "gasUsed": "0x247a5",
                    "logIndex": "0x",
                    "transactionHash": TX_HASH,
                    "transactionIndex": "0x",
                }
            ],
        )
        assert log.address == ADDRESS
        assert log.data is None
        assert log.block_number == 0xC48174
        assert log.timestamp == 0x60CDD8F7
        assert log.log_index == 0
        assert log.transaction_index == 0


class TestGasOracle:
    def test_decimal_prices(self):
        oracle = validate(
            gas_tracker.GasOracleResult,
            {
                "LastBlock": "13053741",
                "SafeGasPrice": "20",
                "ProposeGasPrice": "22",
                "FastGasPrice": "24.5",
                "suggestBaseFee": "19.230609716",
                "gasUsedRatio": "0.370119078777807,0.8954731,0.550911766666667",
            },
        )
        assert oracle.last_block == 13053741
        assert oracle.fast_gas_price == Decimal("24.5")
        assert oracle.suggested_base_fee == Decimal("19.230609716")
        assert oracle.gas_used_ratio[1] == Decimal("0.8954731")


class TestStats:
    def test_ether2_supply(self):
        supply = validate(
            stats.Ether2SupplyResult,
            {
                "EthSupply": "122373866217800000000000000",
                "Eth2Staking": "1157529105115885000000000",
                "BurntFees": "3102505506455601519229842",
                "WithdrawnTotal": "1170200333006131000000000",
            },
        )
        assert supply.ether_supply == 122373866217800000000000000
        assert supply.burnt_fees == 3102505506455601519229842

    def test_ether_price_is_exact(self):
        price = validate(
            stats.EtherPriceResult,
            {
                "ethbtc": "0.06116",
                "ethbtc_timestamp": "1624961308",
                "ethusd": "2149.18",
                "ethusd_timestamp": "1624961308",
            },
        )
        assert price.eth_usd == Decimal("2149.18")
        assert price.eth_btc_timestamp == 1624961308

    def test_node_size(self):
        [size] = validate(
            stats.NodeSizeList,
            [
                {
                    "blockNumber": "7156164",
                    "chainTimeStamp": "2019-02-01",
                    "chainSize": "184726421279",
                    "clientType": "Geth",
                    "syncMode": "Default",
                }
            ],
        )
        assert size.chain_timestamp == 1548979200
        assert size.client_type == "Geth"

    def test_node_count(self):
        count = validate(stats.NodeCountResult, {"UTCDate": "2021-06-29", "TotalNodeCount": "6413"})
        assert count.count == 6413
        assert count.timestamp == 1624924800

    def test_wei_scalar(self):
        assert validate(stats.WeiResult, "116487067936800000000000000") == 116487067936800000000000000
        with pytest.raises(ValidationError) as excinfo:
            validate(stats.WeiResult, "1.5")
        assert excinfo.value.path == "result"


class TestTransactionStatus:
    def test_failed_execution(self):
        status = validate(transaction.ExecutionStatusResult, {"isError": "1", "errDescription": "Bad jump destination"})
        assert status.is_error is True
        assert status.description == "Bad jump destination"

    def test_successful_execution(self):
        status = validate(transaction.ExecutionStatusResult, {"isError": "0", "errDescription": ""})
        assert status.is_error is False
        assert status.description is None

    @pytest.mark.parametrize(("wire", "expected"), [("1", True), ("0", False), ("", None)])
    def test_receipt_status(self, wire, expected):
        assert validate(transaction.ReceiptStatusResult, {"status": wire}).status is expected
