import pytest

from apps.configurator.engine import ValidationError
from apps.configurator.models import CustomOption, Variant
from apps.configurator.services import ConfigurationService


@pytest.mark.django_db
class TestConfigurationService:
    def setup_method(self):
        self.selection = {'Tamanho': 'M', 'Cor': 'Azul'}

    def _gift_wrap_id(self, product):
        return str(CustomOption.objects.get(product=product, name='Embrulho').pk)

    def test_open_session_replays_input(self, product):
        session = ConfigurationService.open_session(
            product, self.selection, {self._gift_wrap_id(product): True}
        )

        assert session.matched_variant.sku == 'camiseta-m-azul'
        assert str(session.unit_price) == '117.50'
        assert session.is_valid is True

    def test_open_session_without_input(self, product):
        session = ConfigurationService.open_session(product)

        assert session.matched_variant is None
        assert session.is_complete is False

    def test_describe(self, product):
        session = ConfigurationService.open_session(product, self.selection)

        data = ConfigurationService.describe(session, quantity=2)

        assert data['product_id'] == str(product.pk)
        assert data['base_price'] == '100.00'
        assert data['unit_price'] == '110.00'
        assert data['quantity'] == 2
        assert data['total_price'] == '220.00'
        assert data['status'] == 'complete'
        assert data['is_valid'] is True
        assert data['errors'] == []
        assert data['warnings'] == []
        assert data['matched_variant']['sku'] == 'camiseta-m-azul'
        assert data['matched_variant']['stock_status'] == 'low_stock'
        assert data['matched_variant']['price_override'] == '10.00'
        assert data['availability'] == {
            'Tamanho': {'P': True, 'M': True},
            'Cor': {'Azul': True, 'Preto': False},
        }

    def test_low_stock_threshold_comes_from_settings(self, product, settings):
        settings.CONFIGURATOR = {**settings.CONFIGURATOR, 'LOW_STOCK_THRESHOLD': 1}
        session = ConfigurationService.open_session(product, self.selection)

        data = ConfigurationService.describe(session)

        assert data['matched_variant']['stock_status'] == 'in_stock'

    def test_describe_reports_problems(self, product):
        session = ConfigurationService.open_session(
            product,
            {'Tamanho': 'P', 'Cor': 'Preto'},
            {str(CustomOption.objects.get(name='Monograma').pk): 'ABCD'},
        )

        data = ConfigurationService.describe(session)

        assert data['status'] == 'complete'
        assert data['is_valid'] is False
        assert [e['code'] for e in data['errors']] == ['invalid_custom_answer']
        assert [w['code'] for w in data['warnings']] == ['no_matching_variant']
        assert data['matched_variant']['stock_status'] == 'out_of_stock'

    def test_commit(self, product):
        session = ConfigurationService.open_session(
            product, self.selection, {self._gift_wrap_id(product): True}
        )

        result = ConfigurationService.commit(session, quantity=3)

        variant = Variant.objects.get(sku='camiseta-m-azul')
        assert result['quantity'] == 3
        assert result['total_price'] == '352.50'
        assert result['cart_line']['matched_variant_id'] == str(variant.pk)
        assert result['cart_line']['unit_price'] == '117.50'
        assert result['cart_line']['attribute_selections'] == self.selection

    def test_commit_incomplete_raises(self, product):
        session = ConfigurationService.open_session(product, {'Tamanho': 'M'})

        with pytest.raises(ValidationError) as exc_info:
            ConfigurationService.commit(session)

        assert [issue.field for issue in exc_info.value.errors] == ['Cor']
