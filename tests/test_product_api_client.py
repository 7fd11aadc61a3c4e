import pytest

from src.product_api import (
    CATALOG_ENDPOINTS,
    ConfigurationError,
    DuplicateEndpointError,
    EndpointDefinition,
    InvalidRequestError,
    ProductApi,
    ProductApiSettings,
    endpoint_names,
)


@pytest.mark.parametrize(
    "settings",
    [
        None,
        "",
        {},
        {"host": "api.backcountry.com"},
        {"site": "bcs"},
        {"host": "", "site": "bcs"},
    ],
    ids=["no-settings", "wrong-type", "empty", "no-site", "no-host", "blank-host"],
)
def test_construction_rejects_bad_settings(settings):
    with pytest.raises(ConfigurationError):
        ProductApi(settings)


def test_construction_wraps_pydantic_validation_errors():
    with pytest.raises(ConfigurationError):
        ProductApi({"host": "api.backcountry.com", "site": "bcs", "version": "not-a-number"})


def test_config_matches_explicit_settings():
    settings = {
        "debug": True,
        "host": "a host",
        "isServer": False,
        "site": "a site",
        "version": 999,
        "preview": True,
    }
    config = ProductApi(settings).helpers.get_config()

    assert config.site == settings["site"]
    assert config.host == settings["host"]
    assert config.is_server is False
    assert config.version == 999
    assert config.preview is True


def test_config_defaults_when_settings_are_not_explicit(product_api):
    config = product_api.helpers.get_config()

    assert config.is_server is True
    assert config.preview is False
    assert config.version == 1


def test_accepts_settings_model():
    api = ProductApi(ProductApiSettings(host="api.backcountry.com", site="bcs", debug=True))
    assert api.helpers.get_config().site == "bcs"


def test_debug_mode_exposes_helpers_and_set_endpoint(product_api):
    assert product_api.helpers is not None
    assert callable(product_api.set_endpoint)


def test_non_debug_mode_hides_helpers_and_set_endpoint(default_settings):
    api = ProductApi({**default_settings, "debug": False})

    assert not hasattr(api, "helpers")
    assert not hasattr(api, "set_endpoint")


def test_non_debug_mode_exposes_exactly_the_catalogue(default_settings):
    api = ProductApi({**default_settings, "debug": False})
    public = [name for name in vars(api) if not name.startswith("_")]

    assert len(public) == 21
    assert set(public) == set(CATALOG_ENDPOINTS)
    assert all(callable(getattr(api, name)) for name in public)
    assert endpoint_names(api) == list(CATALOG_ENDPOINTS)


def test_get_config_returns_snapshot(product_api):
    config = product_api.helpers.get_config()

    assert list(config.model_dump())[:6] == ["debug", "host", "is_server", "preview", "site", "version"]

    config.site = "changed"
    assert product_api.helpers.get_config().site == "bcs"


def test_helpers_template(product_api):
    result = product_api.helpers.template("/some/endpoint/{{key1}}/and/{{key2}}", {"key1": "foo", "key2": "bar"})
    assert result == "/some/endpoint/foo/and/bar"


def test_helpers_build_options(product_api):
    static = {"site": "bcs", "preview": False}
    defaults = {"a": "foo", "b": "foo"}
    custom = {"a": "bar", "b": "baz"}

    assert product_api.helpers.build_options({}, {}) == static
    assert product_api.helpers.build_options(defaults, {}) == {**static, **defaults}
    assert product_api.helpers.build_options(defaults, custom) == {**static, **custom}


@pytest.mark.asyncio
async def test_process_request_builds_method_url_and_params(product_api, monkeypatch):
    calls = []

    async def fake_api_call(method, url, params):
        calls.append((method, url, params))
        return {"ok": True}

    monkeypatch.setattr(product_api.helpers, "api_call", fake_api_call)

    result = await product_api.helpers.process_request(
        {"tpl": "/testEndpoint/{{id}}"},
        {"id": "foo"},
        {"fields": "id,title,brand"},
    )

    assert result == {"ok": True}
    assert calls == [
        (
            "GET",
            "//api.backcountry.com/v1/testEndpoint/foo",
            {"site": "bcs", "preview": False, "fields": "id,title,brand"},
        )
    ]


@pytest.mark.asyncio
async def test_setters_apply_to_later_calls(product_api, monkeypatch):
    urls = []

    async def fake_api_call(method, url, params):
        urls.append((url, params["preview"]))
        return {}

    monkeypatch.setattr(product_api.helpers, "api_call", fake_api_call)

    product_api.helpers.set_host("staging.backcountry.com")
    product_api.helpers.set_preview(True)
    await product_api.findRules({"id": "r1"})

    assert urls == [("//staging.backcountry.com/v1/rules/r1", True)]
    assert product_api.helpers.get_config().host == "staging.backcountry.com"


@pytest.mark.asyncio
async def test_non_mapping_request_is_raised_on_await(product_api):
    pending = product_api.findProducts("TNF0123")

    with pytest.raises(InvalidRequestError):
        await pending


def test_set_endpoint_adds_new_method(product_api):
    assert product_api.set_endpoint("myNewEndpoint", {"tpl": "/route/foo/{{id}}", "opt": {"fields": "id", "limit": 999}})
    assert callable(product_api.myNewEndpoint)


@pytest.mark.asyncio
async def test_new_endpoint_calls_process_request(product_api, monkeypatch):
    seen = []

    async def fake_process_request(endpoint, request, options=None):
        seen.append((endpoint, request, options))
        return "done"

    monkeypatch.setattr(product_api.helpers, "process_request", fake_process_request)

    endpoint = {"tpl": "/route/foo/{{id}}", "opt": {"fields": "id", "limit": 999}}
    product_api.set_endpoint("myNewEndpoint", endpoint)
    result = await product_api.myNewEndpoint({"id": "bar"}, {"foo": "bar"})

    assert result == "done"
    definition, request, options = seen[0]
    assert definition == EndpointDefinition(tpl=endpoint["tpl"], opt=endpoint["opt"])
    assert request == {"id": "bar"}
    assert options["foo"] == "bar"


def test_set_endpoint_rejects_existing_name(product_api):
    with pytest.raises(DuplicateEndpointError):
        product_api.set_endpoint("findProducts", {"tpl": "template"})


def test_set_endpoint_rejects_reserved_names(product_api):
    with pytest.raises(DuplicateEndpointError):
        product_api.set_endpoint("helpers", {"tpl": "template"})


def test_set_endpoint_override_replaces_callable(product_api):
    original = product_api.findProducts

    assert product_api.set_endpoint("findProducts", {"tpl": "/v2products/{{productId}}"}, override=True)
    assert product_api.findProducts is not original
    assert product_api.findProducts.definition.tpl == "/v2products/{{productId}}"


@pytest.mark.parametrize(
    "field, value",
    [("version", "2"), ("preview", "yes"), ("isServer", 1), ("isServer", "is it on the server"), ("debug", "x")],
)
def test_settings_are_not_coerced(default_settings, field, value):
    with pytest.raises(ConfigurationError):
        ProductApi({**default_settings, field: value})


def test_settings_values_are_kept_verbatim(default_settings):
    api = ProductApi({**default_settings, "version": 2, "preview": True, "isServer": False})
    config = api.helpers.get_config()

    assert config.version == 2 and type(config.version) is int
    assert config.preview is True
    assert config.is_server is False


@pytest.mark.asyncio
async def test_missing_request_is_raised_on_await(product_api):
    pending = product_api.findProducts()

    with pytest.raises(InvalidRequestError):
        await pending


@pytest.mark.parametrize(
    "setter, value",
    [("set_host", ""), ("set_debug", "x"), ("set_preview", "yes")],
)
def test_setters_reject_invalid_values(product_api, setter, value):
    before = product_api.helpers.get_config()

    with pytest.raises(ConfigurationError):
        getattr(product_api.helpers, setter)(value)

    assert product_api.helpers.get_config() == before
