from typing import Any, Optional

from store_getters_linter.domain.config import ConfigurationLoader
from store_getters_linter.domain.rules.getter_mutation import GetterMutationRule
from store_getters_linter.infrastructure.config_file_loader import ConfigFileLoader
from store_getters_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from store_getters_linter.infrastructure.gateways.text_splice_fixer_gateway import (
    TextSpliceFixerGateway,
)


class StoreGettersContainer:
    """Dependency Injection Container for the store-getters linter."""

    _instance: Optional["StoreGettersContainer"] = None

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        config_loader = ConfigurationLoader(ConfigFileLoader.load_config_from_fs())
        self.register_singleton("ConfigurationLoader", config_loader)
        self.register_singleton("AstroidGateway", AstroidGateway())
        self.register_singleton("FixerGateway", TextSpliceFixerGateway())
        self.register_singleton("GetterMutationRule", GetterMutationRule())

    @classmethod
    def get_instance(cls) -> "StoreGettersContainer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register_singleton(self, name: str, instance: Any) -> None:
        self._singletons[name] = instance

    def get(self, name: str) -> Any:
        if name not in self._singletons:
            raise KeyError(f"Nothing registered under {name!r}")
        return self._singletons[name]

    def get_config_loader(self) -> ConfigurationLoader:
        return self.get("ConfigurationLoader")

    def get_astroid_gateway(self) -> AstroidGateway:
        return self.get("AstroidGateway")

    def get_fixer_gateway(self) -> TextSpliceFixerGateway:
        return self.get("FixerGateway")

    def get_rule(self) -> GetterMutationRule:
        return self.get("GetterMutationRule")
