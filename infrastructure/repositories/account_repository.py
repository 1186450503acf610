from __future__ import annotations

import copy
from typing import Any, Dict, Optional

from application.ports.storage import KeyValueStorePort
from domain.exceptions import NotFoundError
from infrastructure.storage.keys import STORAGE_KEYS


def _empty_account() -> Dict[str, Any]:
    return {"email": "", "password": "", "token": "", "refresh": "", "pk": None}


DEFAULT_ACCOUNTS: Dict[str, Any] = {"1": _empty_account(), "2": _empty_account()}


class AccountRepository:
    def __init__(self, store: KeyValueStorePort):
        self._store = store

    def get_all(self) -> Dict[str, Any]:
        accounts = self._store.load(STORAGE_KEYS["ACCOUNTS"], DEFAULT_ACCOUNTS)
        return accounts if isinstance(accounts, dict) else copy.deepcopy(DEFAULT_ACCOUNTS)

    def get(self, slot: str) -> Optional[Dict[str, Any]]:
        return self.get_all().get(str(slot))

    def set(self, slot: str, data: Dict[str, Any]) -> bool:
        accounts = self.get_all()
        current = accounts.get(str(slot)) or _empty_account()
        current.update(data)
        accounts[str(slot)] = current
        return self._store.save(STORAGE_KEYS["ACCOUNTS"], accounts)

    def clear(self, slot: str) -> bool:
        accounts = self.get_all()
        if str(slot) not in accounts:
            raise NotFoundError(f"Account slot not found: {slot}")
        accounts[str(slot)] = _empty_account()
        return self._store.save(STORAGE_KEYS["ACCOUNTS"], accounts)

    def clear_all(self) -> bool:
        return self._store.save(STORAGE_KEYS["ACCOUNTS"], copy.deepcopy(DEFAULT_ACCOUNTS))

    def get_token(self, account_id: str) -> Optional[str]:
        account = self.get(account_id)
        if not account:
            return None
        return account.get("token") or None
