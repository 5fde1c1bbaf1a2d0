"""
Script to create a configurable sample product for trying the configurator API.
Run with: python manage.py shell < create_sample_data.py
"""
from decimal import Decimal

from apps.configurator.models import (
    Product,
    AttributeType,
    AttributeOption,
    Variant,
    VariantAttribute,
    CustomOption,
    CustomOptionChoice,
)

# Create Product
print("Creating product...")

product, _ = Product.objects.get_or_create(
    slug='camiseta-basica',
    defaults={
        'name': 'Camiseta Básica',
        'description': 'Camiseta de algodão confortável',
        'base_price': Decimal('79.90'),
        'is_active': True,
    }
)

# Create Attribute Types
print("Creating attribute types...")

size, _ = AttributeType.objects.get_or_create(
    product=product,
    name='Tamanho',
    defaults={'display_kind': 'button', 'is_required': True, 'display_order': 1}
)

color, _ = AttributeType.objects.get_or_create(
    product=product,
    name='Cor',
    defaults={'display_kind': 'swatch', 'is_required': True, 'display_order': 2}
)

# Create Attribute Options
print("Creating attribute options...")

sizes = ['P', 'M', 'G', 'GG']
for i, s in enumerate(sizes):
    AttributeOption.objects.get_or_create(
        attribute_type=size,
        value=s,
        defaults={'display_order': i}
    )

colors = ['Preto', 'Branco', 'Azul']
color_hexes = ['#000000', '#FFFFFF', '#0000FF']
for i, (c, h) in enumerate(zip(colors, color_hexes)):
    AttributeOption.objects.get_or_create(
        attribute_type=color,
        value=c,
        defaults={'color_hex': h, 'display_order': i}
    )

# Create Variants (not every combination exists, and some are sold out)
print("Creating variants...")

stock_table = {
    ('P', 'Preto'): 10,
    ('P', 'Branco'): 0,
    ('M', 'Preto'): 3,
    ('M', 'Branco'): 12,
    ('M', 'Azul'): 8,
    ('G', 'Preto'): 6,
    ('G', 'Azul'): 0,
    ('GG', 'Preto'): 2,
}

for (s, c), stock in stock_table.items():
    sku = f"CAM-{c[:3].upper()}-{s}"
    variant, created = Variant.objects.get_or_create(
        sku=sku,
        defaults={
            'product': product,
            'stock_quantity': stock,
            'price_override': Decimal('10.00') if s == 'GG' else None,
        }
    )
    if created:
        VariantAttribute.objects.create(
            variant=variant,
            attribute_option=AttributeOption.objects.get(attribute_type=size, value=s)
        )
        VariantAttribute.objects.create(
            variant=variant,
            attribute_option=AttributeOption.objects.get(attribute_type=color, value=c)
        )
        # Regenerate the name now that attributes exist
        variant.name = ''
        variant.save()

# Create Custom Options
print("Creating custom options...")

monogram, _ = CustomOption.objects.get_or_create(
    product=product,
    name='Monograma',
    defaults={
        'kind': 'text',
        'is_required': False,
        'price_modifier': Decimal('15.00'),
        'max_length': 3,
        'placeholder': 'Até 3 letras',
        'display_order': 1,
    }
)

gift_wrap, _ = CustomOption.objects.get_or_create(
    product=product,
    name='Embrulho para presente',
    defaults={'kind': 'checkbox', 'display_order': 2}
)
CustomOptionChoice.objects.get_or_create(
    custom_option=gift_wrap,
    value='yes',
    defaults={'label': 'Embrulhar para presente', 'price': Decimal('7.50')}
)

font, _ = CustomOption.objects.get_or_create(
    product=product,
    name='Fonte do monograma',
    defaults={'kind': 'select', 'display_order': 3}
)
for i, (label, value, price) in enumerate([
    ('Clássica', 'classic', None),
    ('Cursiva', 'script', Decimal('5.00')),
]):
    CustomOptionChoice.objects.get_or_create(
        custom_option=font,
        value=value,
        defaults={'label': label, 'price': price, 'display_order': i}
    )

print(f"Done! Product: {product.name} ({product.variants.count()} variants)")
