"""
Runtime configuration for gelato-tasks
"""

import os

from dotenv import find_dotenv, load_dotenv

# .env of the working directory, not of the installed package
load_dotenv(find_dotenv(usecwd=True))

# =====================================================================
# NETWORK
# =====================================================================
DEFAULT_NETWORK = os.getenv("GELATO_NETWORK", "rinkeby")
INFURA_ID = os.getenv("INFURA_ID", "")

# =====================================================================
# ACCOUNTS
# =====================================================================
# Signers are derived from the mnemonic like a buidler/hardhat node does
MNEMONIC = os.getenv("DEMO_ACCOUNTS_MNEMONIC", "")
PRIVATE_KEY = os.getenv("PRIVATE_KEY", "")

# =====================================================================
# FILES
# =====================================================================
ABI_DIR = os.getenv(
    "GELATO_ABI_DIR", os.path.join(os.path.dirname(os.path.abspath(__file__)), "abis")
)
# Optional JSON file with extra address book entries / deployments per network
ADDRESS_BOOK_OVERLAY = os.getenv("GELATO_ADDRESS_BOOK", "")

# =====================================================================
# TRANSACTIONS
# =====================================================================
TX_RECEIPT_TIMEOUT = int(os.getenv("TX_RECEIPT_TIMEOUT", "300"))  # sec
GAS_PRICE_MULTIPLIER = float(os.getenv("GAS_PRICE_MULTIPLIER", "1.2"))

# =====================================================================
# LOGGING
# =====================================================================
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def rpc_url_override(network):
    """<NETWORK>_RPC_URL wins over the url template of the network table."""
    return os.getenv(f"{network.upper()}_RPC_URL", "")

