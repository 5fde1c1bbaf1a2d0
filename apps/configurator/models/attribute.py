from decimal import Decimal

from django.core.validators import RegexValidator
from django.db import models
from django.utils.text import slugify


class AttributeType(models.Model):
    """
    A variation axis of one product.
    Examples: Size, Color, Length.

    The name is the key variants are matched on, so it is unique per product.
    """
    DISPLAY_KIND_CHOICES = [
        ('button', 'Botões'),
        ('swatch', 'Amostras de cor'),
        ('dropdown', 'Lista suspensa'),
        ('image', 'Imagens'),
        ('size-chart', 'Tabela de tamanhos'),
    ]

    product = models.ForeignKey(
        'configurator.Product',
        on_delete=models.CASCADE,
        related_name='attribute_types',
        verbose_name='Produto'
    )
    name = models.CharField(
        max_length=100,
        verbose_name='Nome'
    )
    slug = models.SlugField(
        max_length=100,
        verbose_name='Slug'
    )
    display_kind = models.CharField(
        max_length=20,
        choices=DISPLAY_KIND_CHOICES,
        default='button',
        verbose_name='Tipo de exibição'
    )
    is_required = models.BooleanField(
        default=True,
        verbose_name='Obrigatório'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )

    class Meta:
        ordering = ['display_order', 'name']
        unique_together = [['product', 'name'], ['product', 'slug']]
        verbose_name = 'Tipo de Atributo'
        verbose_name_plural = 'Tipos de Atributos'

    def __str__(self):
        return f"{self.name} [{self.product.name}]"

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)


class AttributeOption(models.Model):
    """
    Possible values for each attribute type.

    Examples:
        - Product "Camiseta" + AttributeType="Cor" -> Options: "Azul", "Branco"
        - Product "Camiseta" + AttributeType="Tamanho" -> Options: "P", "M", "G"
    """
    hex_color_validator = RegexValidator(
        regex=r'^#[0-9A-Fa-f]{6}$',
        message='Cor deve estar no formato hexadecimal (#RRGGBB)'
    )

    attribute_type = models.ForeignKey(
        AttributeType,
        on_delete=models.CASCADE,
        related_name='options',
        verbose_name='Tipo de Atributo'
    )
    value = models.CharField(
        max_length=100,
        verbose_name='Valor'
    )
    display_value = models.CharField(
        max_length=100,
        blank=True,
        verbose_name='Valor de exibição',
        help_text='Nome alternativo para exibição (opcional)'
    )
    color_hex = models.CharField(
        max_length=7,
        blank=True,
        validators=[hex_color_validator],
        verbose_name='Cor Hex',
        help_text='Para swatches de cor (#RRGGBB)'
    )
    image_url = models.URLField(
        blank=True,
        verbose_name='Imagem',
        help_text='Para opções exibidas como imagem'
    )
    is_out_of_stock = models.BooleanField(
        default=False,
        verbose_name='Esgotado',
        help_text='Marca a opção como indisponível independente do estoque das variantes'
    )
    price_modifier = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        verbose_name='Modificador de preço'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )

    class Meta:
        ordering = ['display_order', 'value']
        unique_together = ['attribute_type', 'value']
        verbose_name = 'Opção de Atributo'
        verbose_name_plural = 'Opções de Atributos'

    def __str__(self):
        return f"{self.attribute_type.name}: {self.get_display_value()}"

    def get_display_value(self):
        return self.display_value or self.value
