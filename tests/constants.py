"""
Addresses and secrets shared by the tests
"""

# well known dev mnemonic (hardhat / anvil)
TEST_MNEMONIC = "test test test test test test test test test test test junk"
TEST_PRIVATE_KEY = "0x59c6995e998f97a5a0044966f0945389dc9e86dae88c7a8412f4603b6b78690d"

LUIS = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
LUIS_PROXY = "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC"
DAI = "0x90F79bf6EB2c4f870365E785982E1f101E93b906"
DLETH2X = "0x15d34AAf54267DB7D7c367839AAf71A00a2C6A65"
GELATO_CORE = "0x9965507D1a55bcC2695C58ba16FB37d819B0A4dc"

TX_HASH = "0x" + "ab" * 32
BLOCK_HASH = "0x" + "cd" * 32
