from __future__ import annotations

import logging
from dataclasses import dataclass

from easybook.application.ports.record_store import RecordStorePort
from easybook.application.ports.reference_catalog import ReferenceCatalogPort
from easybook.application.use_cases.booking_ledger import BookingLedger
from easybook.application.use_cases.cart_ledger import CartLedger
from easybook.application.use_cases.checkout import CheckoutUseCase
from easybook.application.use_cases.service_catalog import ServiceCatalogMerger
from easybook.application.use_cases.session_holder import SessionHolder
from easybook.core.config import Settings, settings as default_settings
from easybook.core.logging_config import setup_logging
from easybook.infrastructure.catalog.reference_catalog import ReferenceCatalog
from easybook.infrastructure.store.json_store import JsonRecordStore
from easybook.infrastructure.store.memory_store import MemoryRecordStore


@dataclass(frozen=True)
class Container:
    store: RecordStorePort
    reference: ReferenceCatalogPort
    services: ServiceCatalogMerger
    bookings: BookingLedger
    cart: CartLedger
    session: SessionHolder
    checkout: CheckoutUseCase


def get_record_store(config: Settings) -> RecordStorePort:
    logger = logging.getLogger(__name__)
    logger.info("ENV=%s", config.ENV)
    provider = config.STORE_PROVIDER.strip().lower()
    if not provider:
        provider = "memory" if config.ENV.lower() == "test" else "json"
    if provider == "memory":
        logger.info("Using MemoryRecordStore")
        return MemoryRecordStore()
    logger.info("Using JsonRecordStore at %s", config.DATA_DIR)
    return JsonRecordStore(data_dir=config.DATA_DIR)


def build_container(config: Settings | None = None, store: RecordStorePort | None = None) -> Container:
    """
    Composition root. Every ledger shares the one store instance built here;
    callers own the returned container's lifetime.
    """
    config = config or default_settings
    setup_logging(config.LOG_LEVEL)

    store = store or get_record_store(config)
    reference = ReferenceCatalog()
    bookings = BookingLedger(
        store=store,
        reference=reference,
        in_progress_earnings_share=config.IN_PROGRESS_EARNINGS_SHARE,
    )
    cart = CartLedger(store=store)
    return Container(
        store=store,
        reference=reference,
        services=ServiceCatalogMerger(store=store, reference=reference),
        bookings=bookings,
        cart=cart,
        session=SessionHolder(store=store),
        checkout=CheckoutUseCase(cart=cart, bookings=bookings),
    )
