"""Tests for providers, accounts, tags and company endpoints."""

from __future__ import annotations

import json

import httpx
import pytest

from cuentica.endpoints import (
    AccountEndpoint,
    CompanyEndpoint,
    ProviderEndpoint,
    TagEndpoint,
    infer_business_type,
)


class TestInferBusinessType:
    @pytest.mark.parametrize("tax_id", ["B12345678", "a1234", "W0000000J"])
    def test_company_prefixes(self, tax_id: str) -> None:
        assert infer_business_type(tax_id) == "company"

    @pytest.mark.parametrize("tax_id", ["12345678Z", "X1234567L", "I123", ""])
    def test_individuals(self, tax_id: str) -> None:
        assert infer_business_type(tax_id) == "individual"


class TestProviderFindOrCreate:
    @pytest.mark.asyncio
    async def test_returns_existing(self, make_client, record) -> None:
        handler = record(httpx.Response(200, json=[{"id": 3, "cif": "B12345678"}]))
        async with make_client(handler) as client:
            provider = await ProviderEndpoint(client).find_or_create("b12345678", "Acme SL")
        assert provider == {"id": 3, "cif": "B12345678"}
        assert handler.calls == 1

    @pytest.mark.asyncio
    async def test_creates_when_missing(self, make_client, record) -> None:
        handler = record(
            httpx.Response(200, json=[]),
            httpx.Response(201, json={"id": 10, "cif": "B12345678"}),
        )
        async with make_client(handler) as client:
            provider = await ProviderEndpoint(client).find_or_create("b12345678", "Acme SL")

        assert provider["id"] == 10
        create = handler.last
        assert create.method == "POST"
        assert create.url.path == "/provider"
        assert json.loads(create.content) == {
            "cif": "B12345678",
            "nombre": "Acme SL",
            "business_name": "Acme SL",
            "business_type": "company",
            "pais": "ES",
        }

    @pytest.mark.asyncio
    async def test_create_invalidates_provider_search(self, make_client, record) -> None:
        handler = record(httpx.Response(200, json=[]), httpx.Response(201, json={"id": 1}))
        async with make_client(handler) as client:
            await ProviderEndpoint(client).find_or_create("12345678Z", "Ana")
            assert client.get_cache_stats()["size"] == 0
        assert json.loads(handler.last.content)["business_type"] == "individual"


class TestAccounts:
    @pytest.mark.asyncio
    async def test_get_default_prefers_flagged(self, make_client, record) -> None:
        accounts = [{"id": 1, "is_default": False}, {"id": 2, "is_default": True}]
        async with make_client(record(httpx.Response(200, json=accounts))) as client:
            assert (await AccountEndpoint(client).get_default())["id"] == 2

    @pytest.mark.asyncio
    async def test_get_default_falls_back_to_first(self, make_client, record) -> None:
        accounts = [{"id": 7}, {"id": 8}]
        async with make_client(record(httpx.Response(200, json=accounts))) as client:
            assert (await AccountEndpoint(client).get_default())["id"] == 7

    @pytest.mark.asyncio
    async def test_get_default_without_accounts(self, make_client, record) -> None:
        async with make_client(record(httpx.Response(200, json=[]))) as client:
            with pytest.raises(LookupError, match="No payment accounts found"):
                await AccountEndpoint(client).get_default()

    @pytest.mark.asyncio
    async def test_active_filter_is_sent_as_text(self, make_client, record) -> None:
        handler = record(httpx.Response(200, json=[]))
        async with make_client(handler) as client:
            await AccountEndpoint(client).list(active=True)
        assert handler.last.url.params["active"] == "true"


class TestTagsAndCompany:
    @pytest.mark.asyncio
    async def test_get_all_uses_large_page(self, make_client, record) -> None:
        handler = record(httpx.Response(200, json=[{"id": 1, "name": "q1"}]))
        async with make_client(handler) as client:
            tags = await TagEndpoint(client).get_all()
        assert tags == [{"id": 1, "name": "q1"}]
        assert handler.last.url.params["page_size"] == "300"

    @pytest.mark.asyncio
    async def test_company_is_cached(self, make_client, record) -> None:
        handler = record(httpx.Response(200, json={"name": "Acme"}))
        async with make_client(handler) as client:
            company = CompanyEndpoint(client)
            await company.get()
            assert await company.get() == {"name": "Acme"}
        assert handler.calls == 1
        assert handler.last.url.path == "/company"
