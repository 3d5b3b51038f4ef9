"""Tests for package/binary name to product key mapping."""

import pytest
from packageurl import PackageURL

from eolcheck._lifecycle.mapper import PRODUCT_MAP, map_package_to_product, map_purl_to_product


class TestProductMap:
    def test_has_broad_coverage(self):
        assert len(PRODUCT_MAP) >= 90

    def test_is_read_only(self):
        with pytest.raises(TypeError):
            PRODUCT_MAP["node"] = "something-else"

    def test_values_are_lowercase_keys(self):
        for product in PRODUCT_MAP.values():
            assert product == product.lower()
            assert " " not in product


class TestMapPackageToProduct:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("node", "nodejs"),
            ("nodejs", "nodejs"),
            ("postgres", "postgresql"),
            ("pg", "postgresql"),
            ("psql", "postgresql"),
            ("mysql2", "mysql"),
            ("mongoose", "mongodb"),
            ("redis-server", "redis"),
            ("ioredis", "redis"),
            ("@angular/core", "angular"),
            ("laravel/framework", "laravel"),
            ("python3", "python"),
            ("docker", "docker-engine"),
            ("@playwright/test", "playwright"),
        ],
    )
    def test_known_names(self, name, expected):
        assert map_package_to_product(name) == expected

    def test_unknown_name(self):
        assert map_package_to_product("left-pad") is None

    def test_lookup_is_exact(self):
        assert map_package_to_product("Node") is None
        assert map_package_to_product(" node") is None


class TestMapPurlToProduct:
    def test_npm_scoped_package(self):
        assert map_purl_to_product("pkg:npm/%40angular/core@17.0.0") == "angular"

    def test_composer_package(self):
        assert map_purl_to_product("pkg:composer/laravel/framework@10.0.0") == "laravel"

    def test_plain_name(self):
        assert map_purl_to_product("pkg:pypi/django@4.2.0") == "django"

    def test_accepts_packageurl_objects(self):
        assert map_purl_to_product(PackageURL(type="npm", name="react", version="18.2.0")) == "react"

    def test_unknown_package(self):
        assert map_purl_to_product("pkg:pypi/left-pad@1.0") is None

    def test_invalid_purl(self):
        assert map_purl_to_product("not a purl") is None
