import logging

from django.db.models import Count, Exists, OuterRef, Prefetch, Q
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.configurator.engine import InvalidCatalogConfiguration, ValidationError
from apps.configurator.models import (
    AttributeOption,
    AttributeType,
    CustomOption,
    Product,
    Variant,
)
from apps.configurator.services import ConfigurationService
from .filters import VariantFilter
from .serializers import (
    ConfigurationRequestSerializer,
    ProductDetailSerializer,
    ProductListSerializer,
    VariantDetailSerializer,
    VariantListSerializer,
)


logger = logging.getLogger(__name__)


def _catalog_error_response(product, exc):
    logger.error(
        "Product %s has an invalid catalog configuration: %s",
        product.slug, exc.problems
    )
    return Response(
        {
            'error': 'invalid_catalog_configuration',
            'problems': exc.problems,
        },
        status=status.HTTP_409_CONFLICT
    )


class ProductViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for products and their configuration.

    list: List active products
    retrieve: Get product detail with variation groups, custom options and variants
    configuration: Derived view for an empty selection
    configure: Derived view for the submitted selection
    commit: Resolve the cart line for the submitted selection
    """
    queryset = Product.objects.filter(is_active=True)
    lookup_field = 'slug'
    permission_classes = [AllowAny]
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name', 'description']
    ordering_fields = ['name', 'created_at']
    ordering = ['name']

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return ProductDetailSerializer
        return ProductListSerializer

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == 'list':
            queryset = queryset.annotate(
                variant_total=Count('variants', distinct=True),
                active_variant_total=Count(
                    'variants', filter=Q(variants__is_active=True), distinct=True
                ),
                has_attribute_types=Exists(
                    AttributeType.objects.filter(product=OuterRef('pk'))
                ),
                has_custom_options=Exists(
                    CustomOption.objects.filter(product=OuterRef('pk'))
                ),
            )
        if self.action == 'retrieve':
            queryset = queryset.prefetch_related(
                Prefetch(
                    'attribute_types',
                    queryset=AttributeType.objects.prefetch_related(
                        Prefetch('options', queryset=AttributeOption.objects.order_by('display_order', 'value'))
                    )
                ),
                Prefetch(
                    'custom_options',
                    queryset=CustomOption.objects.prefetch_related('choices')
                ),
                Prefetch(
                    'variants',
                    queryset=Variant.objects.prefetch_related(
                        'variantattribute_set__attribute_option__attribute_type'
                    )
                ),
            )
        return queryset

    @action(detail=True, methods=['get'])
    def configuration(self, request, slug=None):
        """
        Initial state of the configurator for this product.
        """
        product = self.get_object()
        try:
            session = ConfigurationService.open_session(product)
        except InvalidCatalogConfiguration as exc:
            return _catalog_error_response(product, exc)
        return Response(ConfigurationService.describe(session))

    @action(detail=True, methods=['post'])
    def configure(self, request, slug=None):
        """
        Recompute price, matched variant and availability for a selection.

        Expected payload:
        {
            "attributes": {"Size": "M", "Color": "Blue"},
            "custom_answers": {"12": "ABC"},
            "quantity": 1
        }
        """
        product = self.get_object()
        serializer = ConfigurationRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            session = ConfigurationService.open_session(
                product, data['attributes'], data['custom_answers']
            )
        except InvalidCatalogConfiguration as exc:
            return _catalog_error_response(product, exc)

        return Response(ConfigurationService.describe(session, data['quantity']))

    @action(detail=True, methods=['post'])
    def commit(self, request, slug=None):
        """
        Validate the selection and return the cart line for it.
        Same payload as configure.
        """
        product = self.get_object()
        serializer = ConfigurationRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            session = ConfigurationService.open_session(
                product, data['attributes'], data['custom_answers']
            )
        except InvalidCatalogConfiguration as exc:
            return _catalog_error_response(product, exc)

        try:
            result = ConfigurationService.commit(session, data['quantity'])
        except ValidationError as exc:
            return Response(
                {'errors': [issue.to_dict() for issue in exc.errors]},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(result)


class VariantViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for variants.

    Supports filtering by product, attributes and stock status.
    """
    queryset = Variant.objects.select_related('product').prefetch_related(
        'variantattribute_set__attribute_option__attribute_type'
    )
    permission_classes = [AllowAny]
    filterset_class = VariantFilter
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['sku', 'name', 'product__name']
    ordering_fields = ['sku', 'stock_quantity', 'created_at']
    ordering = ['sku']

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return VariantDetailSerializer
        return VariantListSerializer
