from dependency_injector import containers, providers

from tonwallet.config import Settings, configure_logging
from tonwallet.manager import TonKitManager


class Container(containers.DeclarativeContainer):
    settings = providers.Singleton(Settings)

    logging_setup = providers.Resource(configure_logging, config=settings)

    # Supplied by the host application: callable (account, network) -> kit.
    kit_factory = providers.Dependency()

    kit_manager = providers.Singleton(
        TonKitManager,
        kit_factory=kit_factory,
        settings=settings,
    )
