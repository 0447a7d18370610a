"""
tests/conftest.py — pytest fixtures for the Solidity auditor
"""
import pytest
from app import create_app


@pytest.fixture(scope="session")
def app():
    """Create a test Flask application."""
    application = create_app("testing")
    with application.app_context():
        yield application


@pytest.fixture()
def client(app):
    """Test client for API integration tests."""
    return app.test_client()


@pytest.fixture()
def runner(app):
    return app.test_cli_runner()


# ── Solidity source fixtures ──────────────────────────────────────────────────

# Line numbers matter: the external call is on line 12, the state update
# after it on line 13, the unguarded functions on lines 7 and 11.
_VULNERABLE_BANK = """pragma solidity ^0.6.12;

contract Bank {
    mapping(address => uint) public balances;
    uint public totalDeposits;

    function deposit() public payable {
        totalDeposits = totalDeposits + msg.value;
    }

    function withdraw(uint amount) public {
        msg.sender.call.value(amount)("");
        balances[msg.sender] -= amount;
    }
}
"""

_SAFE_VAULT = """// SPDX-License-Identifier: MIT
pragma solidity ^0.8.4;

contract Vault {
    address public owner;

    /// @notice Hand the vault to a new owner.
    function setOwner(address x) public onlyOwner { owner = x; }

    /// @notice Total of two amounts.
    function total(uint a, uint b) internal pure returns (uint) {
        return a + b;
    }
}
"""


def _call_at_line_five(*following: str) -> str:
    head = [
        "pragma solidity ^0.8.4;",
        "contract Vault {",
        "    uint balance;",
        "    function withdraw(uint amt) internal {",
        '        (bool ok, ) = x.call{value: amt}("");',
    ]
    return "\n".join(head + list(following))


@pytest.fixture(scope="session")
def call_at_line_five():
    """Builds a source whose line 5 is an external call, followed by the given lines."""
    return _call_at_line_five


@pytest.fixture(scope="session")
def vulnerable_bank_source():
    return _VULNERABLE_BANK


@pytest.fixture(scope="session")
def safe_vault_source():
    return _SAFE_VAULT
