"""
Django signals for the configurator app.
Drops a product's cached catalog whenever one of its catalog rows changes.
"""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from .models import (
    AttributeOption,
    AttributeType,
    CustomOption,
    CustomOptionChoice,
    Product,
    Variant,
    VariantAttribute,
)
from .services import CatalogProvider


def _product_id_for(instance):
    """Resolve the owning product without touching possibly deleted parents."""
    if isinstance(instance, Product):
        return instance.pk

    if isinstance(instance, (AttributeType, Variant, CustomOption)):
        return instance.product_id

    if isinstance(instance, AttributeOption):
        return AttributeType.objects.filter(
            pk=instance.attribute_type_id
        ).values_list('product_id', flat=True).first()

    if isinstance(instance, VariantAttribute):
        return Variant.objects.filter(
            pk=instance.variant_id
        ).values_list('product_id', flat=True).first()

    if isinstance(instance, CustomOptionChoice):
        return CustomOption.objects.filter(
            pk=instance.custom_option_id
        ).values_list('product_id', flat=True).first()

    return None


CATALOG_MODELS = [
    Product,
    AttributeType,
    AttributeOption,
    Variant,
    VariantAttribute,
    CustomOption,
    CustomOptionChoice,
]


@receiver(post_save)
@receiver(post_delete)
def invalidate_product_catalog(sender, instance, **kwargs):
    """
    Invalidate the cached engine catalog of the affected product.
    """
    if sender not in CATALOG_MODELS:
        return
    CatalogProvider.invalidate(_product_id_for(instance))
