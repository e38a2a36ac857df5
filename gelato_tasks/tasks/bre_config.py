from gelato_tasks import bre_config as resolver
from gelato_tasks.tasks import flag, param, task


@task(
    "bre-config",
    "Return the network's contract list, address book (category/entry) or a contract's deployed address",
    flag("--contracts", help="List of contract names deployed on the network"),
    flag("--addressbook", help="The whole address book"),
    param("--addressbookcategory", help="An address book category, e.g. erc20"),
    param("--addressbookentry", help="An entry of --addressbookcategory"),
    param("--contractname", help="Deployed address of this contract"),
)
def bre_config(network, contracts, addressbook, addressbookcategory, addressbookentry, contractname):
    return resolver.bre_config(
        network,
        contracts_list=contracts,
        addressbook=addressbook,
        addressbookcategory=addressbookcategory,
        addressbookentry=addressbookentry,
        contractname=contractname,
    )
