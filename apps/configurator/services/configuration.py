"""
Service for configuring a product within one request.
Sessions are rebuilt from the submitted selections on every call; nothing
about the interaction is stored server-side.
"""

import logging
from typing import Any, Dict, Optional

from apps.configurator.engine import DerivedView, SelectionSession
from apps.configurator.models import Product

from .catalog_provider import CatalogProvider, configurator_setting


logger = logging.getLogger(__name__)


class ConfigurationService:
    """
    Service to open selection sessions for a product and describe their results.
    """

    @staticmethod
    def open_session(
        product: Product,
        attributes: Optional[Dict[str, Any]] = None,
        custom_answers: Optional[Dict[str, Any]] = None,
    ) -> SelectionSession:
        """
        Open a session over the cached catalog and replay the shopper's input.

        Args:
            product: The product being configured
            attributes: Dict of {attribute type name: option value}
            custom_answers: Dict of {custom option id: answer}

        Returns:
            SelectionSession reflecting the replayed input

        Raises:
            InvalidCatalogConfiguration: if the product's catalog rows are unusable
        """
        catalog = CatalogProvider.get_catalog(product)
        session = SelectionSession(
            catalog,
            low_stock_threshold=configurator_setting('LOW_STOCK_THRESHOLD'),
        )

        for group_name, value in (attributes or {}).items():
            session.set_attribute(group_name, value)

        for option_id, answer in (custom_answers or {}).items():
            session.set_custom_answer(str(option_id), answer)

        return session

    @staticmethod
    def describe(session: SelectionSession, quantity: int = 1) -> Dict[str, Any]:
        """
        Build the JSON-ready derived view for the display layer.

        Amounts are rendered as strings so no precision is lost on the wire.
        """
        view: DerivedView = session.view_for(quantity)
        catalog = session.catalog
        matched = view.matched_variant

        matched_data = None
        if matched is not None:
            matched_data = {
                'id': matched.id,
                'sku': matched.sku,
                'name': matched.name,
                'stock_quantity': matched.stock_count,
                'stock_status': view.stock_status.value,
                'price_override': (
                    str(matched.price_override)
                    if matched.price_override is not None else None
                ),
            }

        return {
            'product_id': catalog.product_id,
            'selections': dict(session.state.attribute_selections),
            'custom_answers': dict(session.state.custom_answers),
            'base_price': str(catalog.base_price),
            'unit_price': str(view.unit_price),
            'quantity': view.quantity,
            'total_price': str(view.total_price),
            'matched_variant': matched_data,
            'availability': view.availability_by_option,
            'status': view.status.value,
            'is_complete': view.is_complete,
            'is_valid': view.is_valid,
            'errors': [issue.to_dict() for issue in view.errors],
            'warnings': [issue.to_dict() for issue in view.warnings],
        }

    @staticmethod
    def commit(session: SelectionSession, quantity: int = 1) -> Dict[str, Any]:
        """
        Resolve the cart line for the configured product.

        Raises:
            ValidationError: if the configuration can't be bought as is
        """
        payload = session.commit()
        total = session.total_price(quantity)

        logger.info(
            "Configured product %s (variant %s) x%d at %s",
            payload.product_id,
            payload.matched_variant_id,
            quantity,
            payload.unit_price,
        )

        return {
            'cart_line': payload.to_dict(),
            'quantity': quantity,
            'total_price': str(total),
        }
