import json

import pytest

from etherscan_api.exceptions import ValidationError
from etherscan_api.schemas import abi, contract
from etherscan_api.schemas.base import validate
from fakes import ADDRESS, TOKEN, TX_HASH

ERC20_ABI = [
    {
        "constant": True,
        "inputs": [{"name": "owner", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {"inputs": [{"name": "supply", "type": "uint256"}], "stateMutability": "nonpayable", "type": "constructor"},
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "name": "from", "type": "address"},
            {"indexed": True, "name": "to", "type": "address"},
            {"indexed": False, "name": "value", "type": "uint256"},
        ],
        "name": "Transfer",
        "type": "event",
    },
    {"inputs": [{"name": "needed", "type": "uint256"}], "name": "InsufficientBalance", "type": "error"},
    {"stateMutability": "payable", "type": "receive"},
    {"stateMutability": "nonpayable", "type": "fallback"},
]


def _verified(**overrides) -> dict:
    record = {
        "SourceCode": "pragma solidity ^0.8.0; contract Token {}",
        "ABI": json.dumps(ERC20_ABI),
        "ContractName": "Token",
        "CompilerVersion": "v0.8.19+commit.7dd6d404",
        "OptimizationUsed": "1",
        "Runs": "200",
        "ConstructorArguments": "",
        "EVMVersion": "Default",
        "Library": "",
        "LicenseType": "MIT",
        "Proxy": "0",
        "Implementation": "",
        "SwarmSource": "",
    }
    record.update(overrides)
    return record


class TestAbi:
    def test_variants_by_type(self):
        items = validate(abi.AbiResult, json.dumps(ERC20_ABI))

        assert [type(item) for item in items] == [
            abi.AbiFunction,
            abi.AbiConstructor,
            abi.AbiEvent,
            abi.AbiError,
            abi.AbiReceive,
            abi.AbiFallback,
        ]
        balance_of = items[0]
        assert balance_of.name == "balanceOf"
        assert balance_of.state_mutability == "view"
        assert balance_of.outputs[0].type == "uint256"
        assert items[2].inputs[0].indexed is True

    def test_missing_type_means_function(self):
        [item] = validate(abi.AbiResult, [{"name": "foo", "inputs": []}])
        assert isinstance(item, abi.AbiFunction)
        assert item.type == "function"

    def test_tuple_components(self):
        [item] = validate(
            abi.AbiResult,
            [
                {
                    "type": "function",
                    "name": "submit",
                    "inputs": [
                        {
                            "name": "order",
                            "type": "tuple",
                            "components": [{"name": "maker", "type": "address"}, {"name": "amount", "type": "uint256"}],
                        }
                    ],
                }
            ],
        )
        assert [c.name for c in item.inputs[0].components] == ["maker", "amount"]

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            validate(abi.AbiResult, [{"type": "modifier", "name": "onlyOwner"}])

    def test_invalid_json_rejected(self):
        with pytest.raises(ValidationError, match="invalid JSON"):
            validate(abi.AbiResult, "[{")


class TestUnwrapStandardJson:
    def test_double_brace_document(self):
        document = {
            "language": "Solidity",
            "sources": {
                "contracts/Token.sol": {"content": "contract Token {}"},
                "contracts/Lib.sol": {"content": "library Lib {}"},
            },
            "settings": {"optimizer": {"enabled": True, "runs": 200}},
        }
        unwrapped = contract.unwrap_standard_json("{" + json.dumps(document) + "}")

        assert isinstance(unwrapped, contract.StandardJsonInput)
        assert unwrapped.language == "Solidity"
        assert [(s.name, s.content) for s in unwrapped.sources] == [
            ("contracts/Token.sol", "contract Token {}"),
            ("contracts/Lib.sol", "library Lib {}"),
        ]
        assert unwrapped.settings == {"optimizer": {"enabled": True, "runs": 200}}

    def test_flat_source_is_verbatim(self):
        source = "pragma solidity ^0.4.24;\ncontract A {}"
        assert contract.unwrap_standard_json(source) is source

    def test_single_brace_object_is_verbatim(self):
        # single-brace multi-file form: stripping one brace leaves invalid JSON
        source = json.dumps({"A.sol": {"content": "contract A {}"}})
        assert contract.unwrap_standard_json(source) == source

    def test_brace_wrapped_non_document_is_verbatim(self):
        source = '{{"foo": 1}}'
        assert contract.unwrap_standard_json(source) == source


class TestContractSource:
    def test_unverified_variant(self):
        [record] = validate(
            contract.ContractSourceList,
            [_verified(SourceCode="", ABI="Contract source code not verified", ContractName="")],
        )

        assert isinstance(record, contract.UnverifiedContract)
        assert record.verified is False
        assert record.model_dump() == {}

    def test_verified_variant(self):
        [record] = validate(contract.ContractSourceList, [_verified(Implementation=TOKEN.lower())])

        assert isinstance(record, contract.VerifiedContract)
        assert record.verified is True
        assert record.name == "Token"
        assert record.is_optimized is True
        assert record.optimization_runs == 200
        assert record.proxy is False
        assert record.implementation == TOKEN
        assert record.swarm_source is None
        assert record.source_code == "pragma solidity ^0.8.0; contract Token {}"
        assert [f.name for f in record.functions()] == ["balanceOf"]

    def test_verified_with_standard_json(self):
        document = {"language": "Solidity", "sources": {"Token.sol": {"content": "contract Token {}"}}}
        [record] = validate(contract.ContractSourceList, [_verified(SourceCode="{" + json.dumps(document) + "}")])

        assert isinstance(record.source_code, contract.StandardJsonInput)
        assert record.source_code.sources[0].name == "Token.sol"
        assert record.source_code.settings is None

    def test_bad_abi_reports_path(self):
        with pytest.raises(ValidationError) as excinfo:
            validate(contract.ContractSourceList, [_verified(ABI="not json")], "contract.getsourcecode")
        assert excinfo.value.path.startswith("result[0]")
        assert excinfo.value.endpoint == "contract.getsourcecode"


class TestContractCreation:
    def test_parses(self):
        [creation] = validate(
            contract.ContractCreationList,
            [{"contractAddress": TOKEN.lower(), "contractCreator": ADDRESS.lower(), "txHash": TX_HASH}],
        )
        assert creation.contract_address == TOKEN
        assert creation.contract_creator == ADDRESS
        assert creation.tx_hash == TX_HASH
