from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models


class CustomOption(models.Model):
    """
    Per-order customization offered next to the variant selectors.
    Examples: Monogram (text), Gift wrap (checkbox), Engraving font (select).

    Independent of stock; only adds a surcharge when answered.
    """
    KIND_CHOICES = [
        ('text', 'Texto'),
        ('textarea', 'Texto longo'),
        ('select', 'Seleção'),
        ('checkbox', 'Caixa de seleção'),
        ('number', 'Número'),
        ('color', 'Cor (Hex)'),
        ('date', 'Data'),
    ]

    product = models.ForeignKey(
        'configurator.Product',
        on_delete=models.CASCADE,
        related_name='custom_options',
        verbose_name='Produto'
    )
    name = models.CharField(
        max_length=100,
        verbose_name='Nome'
    )
    kind = models.CharField(
        max_length=20,
        choices=KIND_CHOICES,
        default='text',
        verbose_name='Tipo'
    )
    is_required = models.BooleanField(
        default=False,
        verbose_name='Obrigatório'
    )
    price_modifier = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Acréscimo',
        help_text='Somado ao preço quando a opção é preenchida'
    )
    placeholder = models.CharField(
        max_length=255,
        blank=True,
        verbose_name='Placeholder'
    )
    description = models.TextField(
        blank=True,
        verbose_name='Descrição'
    )

    # Input constraints
    max_length = models.PositiveIntegerField(
        null=True,
        blank=True,
        verbose_name='Tamanho máximo',
        help_text='Para texto e texto longo'
    )
    min_value = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        verbose_name='Valor mínimo'
    )
    max_value = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        verbose_name='Valor máximo'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )

    class Meta:
        ordering = ['display_order', 'name']
        verbose_name = 'Opção Personalizada'
        verbose_name_plural = 'Opções Personalizadas'

    def __str__(self):
        return f"{self.name} [{self.product.name}]"


class CustomOptionChoice(models.Model):
    """
    Allowed answers of a select option, or the single priced label of a checkbox.
    """
    custom_option = models.ForeignKey(
        CustomOption,
        on_delete=models.CASCADE,
        related_name='choices',
        verbose_name='Opção Personalizada'
    )
    label = models.CharField(
        max_length=100,
        verbose_name='Rótulo'
    )
    value = models.CharField(
        max_length=100,
        verbose_name='Valor'
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Acréscimo'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )

    class Meta:
        ordering = ['display_order', 'label']
        unique_together = ['custom_option', 'value']
        verbose_name = 'Escolha'
        verbose_name_plural = 'Escolhas'

    def __str__(self):
        return f"{self.custom_option.name}: {self.label}"
