from src.shop.runtime.config.config_data import ConfigData
from src.shop.runtime.context import AppContext, get_config, get_context, with_context


class TestContextManager:
    def test_default_context_available(self):
        context = get_context()

        assert isinstance(context, AppContext)
        assert context.config is get_config()

    def test_override_is_scoped(self):
        original = get_config()
        override = ConfigData()
        override.catalog.default_category = "Sale"

        with with_context(override):
            assert get_config().catalog.default_category == "Sale"
            assert get_config().app.environment == original.app.environment

        assert get_config() is original

    def test_nested_overrides_inherit(self):
        outer = ConfigData()
        outer.app.port = 9001
        inner = ConfigData()
        inner.logging.level = "DEBUG"

        with with_context(outer):
            level_before = get_config().logging.level
            with with_context(inner):
                assert get_config().app.port == 9001
                assert get_config().logging.level == "DEBUG"
            assert get_config().logging.level == level_before
