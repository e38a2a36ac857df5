contracts = (
    # === Actions ===
    # = One-Off =
    # BzX
    "ActionBzxPtokenBurnToToken",
    "ActionBzxPtokenMintWithToken",
    # ERC20
    "ActionERC20Transfer",
    "ActionERC20TransferFrom",
    # Kyber
    "ActionKyberTradeRinkeby",
    # Multimint
    "ActionMultiMintForConditionTimestampPassed",
    # Portfolio Mgmt
    "ActionRebalancePortfolioRinkeby",
    # Gnosis Batch Exchange
    "ActionWithdrawBatchExchangeRinkeby",
    # = Chained =
    # ERC20
    "ActionChainedTimedERC20TransferFromRinkeby",
    # Portfolio Mgmt
    "ActionChainedRebalancePortfolioRinkeby",
    # === GelatoCore ===
    "GelatoCore",
    # === Conditions ===
    # Balances
    "ConditionBalance",
    # Indices
    "ConditionFearGreedIndex",
    # Prices
    "ConditionKyberRateRinkeby",
    # Time
    "ConditionTimestampPassed",
    # === Scripts ===
    # GnosisSafe
    "ScriptGnosisSafeEnableGelatoCore",
    "ScriptGnosisSafeEnableGelatoCoreAndMint",
    # Action specific scripts
    "ScriptEnterPortfolioRebalancingRinkeby",
    "ScriptExitRebalancePortfolioRinkeby",
)
