from datetime import date

import pytest

from etherscan_api.domain.enums import Operator, Sort
from etherscan_api.exceptions import ValidationError
from etherscan_api.schemas.base import build_params, validate
from etherscan_api.schemas.params import (
    BalanceAddresses,
    CreationAddresses,
    EstimateGasParams,
    LogFilter,
    LogPagination,
    NodeSizeQuery,
    Pagination,
    TokenTransferFilter,
)
from fakes import ADDRESS, TOKEN

TOPIC = "0x" + "dd" * 32


class TestPagination:
    def test_renders_decimal_wire_params(self):
        pagination = build_params(Pagination, start_block=0, end_block=99999999, page=2, offset=100, sort="desc")
        assert pagination.sort is Sort.DESC
        assert pagination.to_params() == {
            "startblock": "0",
            "endblock": "99999999",
            "page": "2",
            "offset": "100",
            "sort": "desc",
        }

    def test_empty(self):
        assert build_params(Pagination).to_params() == {}

    @pytest.mark.parametrize(
        ("field", "value"),
        [("offset", 0), ("offset", 10_001), ("page", 0), ("start_block", -1), ("sort", "sideways")],
    )
    def test_out_of_range(self, field, value):
        with pytest.raises(ValidationError) as excinfo:
            build_params(Pagination, **{field: value})
        assert excinfo.value.path == field

    def test_log_pagination_names(self):
        assert build_params(LogPagination, from_block=1, to_block=2).to_params() == {"fromBlock": "1", "toBlock": "2"}


class TestAddressLists:
    def test_balance_limit(self):
        assert len(validate(BalanceAddresses, [ADDRESS] * 20)) == 20
        with pytest.raises(ValidationError):
            validate(BalanceAddresses, [ADDRESS] * 21)

    def test_creation_limits(self):
        with pytest.raises(ValidationError):
            validate(CreationAddresses, [])
        with pytest.raises(ValidationError):
            validate(CreationAddresses, [TOKEN] * 6)

    def test_bad_member_path(self):
        with pytest.raises(ValidationError) as excinfo:
            validate(BalanceAddresses, [ADDRESS, "0xnope"], root="addresses")
        assert excinfo.value.path == "addresses[1]"


class TestTokenTransferFilter:
    def test_needs_address_or_contract(self):
        with pytest.raises(ValidationError, match="address or contract_address"):
            build_params(TokenTransferFilter)

    def test_renders(self):
        token_filter = build_params(TokenTransferFilter, contract_address=TOKEN.lower())
        assert token_filter.to_params() == {"contractaddress": TOKEN}


class TestLogFilter:
    def test_address_only(self):
        assert build_params(LogFilter, address=ADDRESS.lower()).to_params() == {"address": ADDRESS}

    def test_topics_with_operator(self):
        log_filter = build_params(LogFilter, topic0=TOPIC, topic2=TOPIC, topic0_2_opr="or")
        assert log_filter.operators() == {(0, 2): Operator.OR}
        assert log_filter.to_params() == {"topic0": TOPIC, "topic2": TOPIC, "topic0_2_opr": "or"}

    def test_requires_something(self):
        with pytest.raises(ValidationError, match="address or at least one topic"):
            build_params(LogFilter)

    def test_multiple_topics_need_operator(self):
        with pytest.raises(ValidationError, match="need an operator"):
            build_params(LogFilter, topic0=TOPIC, topic1=TOPIC)

    def test_operator_without_topics(self):
        with pytest.raises(ValidationError, match="topic1_3_opr"):
            build_params(LogFilter, topic1=TOPIC, topic1_3_opr="and")

    def test_bad_topic(self):
        with pytest.raises(ValidationError) as excinfo:
            build_params(LogFilter, topic0="0xabc")
        assert excinfo.value.path == "topic0"

    def test_unknown_argument(self):
        with pytest.raises(ValidationError):
            build_params(LogFilter, address=ADDRESS, topic4=TOPIC)


class TestEstimateGasParams:
    def test_ether_string_and_hex_encoding(self):
        params = build_params(EstimateGasParams, to=TOKEN.lower(), data="0x", value="0.5", gas=21000)
        assert params.to_params() == {
            "to": TOKEN,
            "data": "0x",
            "value": hex(5 * 10**17),
            "gas": "0x5208",
        }

    def test_int_value_is_wei(self):
        params = build_params(EstimateGasParams, to=TOKEN, value=255, gas_price=1)
        assert params.to_params() == {"to": TOKEN, "value": "0xff", "gasPrice": "0x1"}


class TestNodeSizeQuery:
    def test_defaults(self):
        query = build_params(NodeSizeQuery, start_date="2019-02-01", end_date=date(2019, 2, 28))
        assert query.to_params() == {
            "startdate": "2019-02-01",
            "enddate": "2019-02-28",
            "clienttype": "geth",
            "syncmode": "default",
            "sort": "asc",
        }

    def test_reversed_range(self):
        with pytest.raises(ValidationError, match="after end_date"):
            build_params(NodeSizeQuery, start_date="2019-03-01", end_date="2019-02-01")
