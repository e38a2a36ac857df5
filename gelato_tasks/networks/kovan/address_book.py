# Nothing is shipped for kovan; entries come from the GELATO_ADDRESS_BOOK overlay
address_book = {
    "EOA": {},
    "erc20": {},
    "userProxy": {},
}
