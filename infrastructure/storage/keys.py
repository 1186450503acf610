STORAGE_KEYS = {
    "CONFIG": "apiTester_config",
    "COLLECTIONS": "apiTester_collections",
    "ENVIRONMENTS": "apiTester_environments",
    "ACCOUNTS": "apiTester_accounts",
    "HISTORY": "apiTester_history",
}
