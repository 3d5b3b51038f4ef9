"""Mapping of package, SDK and binary names to endoflife.date product keys.

Names are curated many-to-one (``pg``, ``postgres`` and ``postgresql`` all
map to ``postgresql``). Lookups are exact; there is no fuzzy matching.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Union

from packageurl import PackageURL

from eolcheck.logging_config import logger

_PRODUCT_MAP = {
    # npm frameworks and libraries
    "react": "react",
    "vue": "vue",
    "@angular/core": "angular",
    "@nestjs/core": "nestjs",
    "next": "nextjs",
    "nuxt": "nuxt",
    "ember-source": "ember",
    "svelte": "svelte",
    "jquery": "jquery",
    "bootstrap": "bootstrap",
    "tailwindcss": "tailwindcss",
    "electron": "electron",
    "native-base": "native-base",
    "react-native": "react-native",
    "expo": "expo",
    "expo-cli": "expo",
    "express": "express",
    # Runtimes and package managers
    "node": "nodejs",
    "nodejs": "nodejs",
    "npm": "npm",
    "yarn": "yarn",
    "pnpm": "pnpm",
    "bun": "bun",
    "deno": "deno",
    # Composer
    "laravel/framework": "laravel",
    "symfony/symfony": "symfony",
    "drupal/core": "drupal",
    "magento/product-community-edition": "magento",
    "typo3/cms-core": "typo3",
    "php": "php",
    "composer": "composer",
    # Python
    "python": "python",
    "python3": "python",
    "django": "django",
    "flask": "flask",
    "ansible": "ansible",
    "ansible-core": "ansible-core",
    "kubernetes": "kubernetes",
    "numpy": "numpy",
    "pandas": "pandas",
    # Go
    "go": "go",
    "golang": "go",
    "github.com/gofiber/fiber": "fiber",
    # Ruby
    "ruby": "ruby",
    "rails": "rails",
    "jekyll": "jekyll",
    "bundler": "bundler",
    "gem": "rubygems",
    # JVM
    "java": "java",
    "openjdk": "java",
    "spring-boot": "spring-boot",
    "spring-framework": "spring-framework",
    "kotlin": "kotlin",
    "scala": "scala",
    # .NET
    "dotnet": "dotnet",
    "dotnet-core": "dotnet",
    # Databases
    "postgresql": "postgresql",
    "postgres": "postgresql",
    "pg": "postgresql",
    "psql": "postgresql",
    "mysql": "mysql",
    "mysql2": "mysql",
    "mongodb": "mongodb",
    "mongoose": "mongodb",
    "mongod": "mongodb",
    "redis": "redis",
    "ioredis": "redis",
    "redis-server": "redis",
    "mariadb": "mariadb",
    "elasticsearch": "elasticsearch",
    "@elastic/elasticsearch": "elasticsearch",
    "memcached": "memcached",
    "cassandra-driver": "cassandra",
    "neo4j-driver": "neo4j",
    "sqlite3": "sqlite",
    "better-sqlite3": "sqlite",
    # Testing frameworks
    "jest": "jest",
    "mocha": "mocha",
    "cypress": "cypress",
    "playwright": "playwright",
    "@playwright/test": "playwright",
    "jasmine": "jasmine",
    "jasmine-core": "jasmine",
    "karma": "karma",
    "ava": "ava",
    "vitest": "vitest",
    "pytest": "pytest",
    # Build tools and bundlers
    "webpack": "webpack",
    "vite": "vite",
    "rollup": "rollup",
    "parcel": "parcel",
    "parcel-bundler": "parcel",
    "esbuild": "esbuild",
    "eslint": "eslint",
    "prettier": "prettier",
    "typescript": "typescript",
    "gradle": "gradle",
    "maven": "maven",
    "ant": "ant",
    "bazel": "bazel",
    "grunt": "grunt",
    # Containers and DevOps
    "docker": "docker-engine",
    "docker-engine": "docker-engine",
    "containerd": "containerd",
    "podman": "podman",
    "kubectl": "kubernetes",
    "terraform": "terraform",
    "git": "git",
    "nginx": "nginx",
    "apache": "apache-http-server",
    "httpd": "apache-http-server",
}

PRODUCT_MAP: Mapping[str, str] = MappingProxyType(_PRODUCT_MAP)

# PURL types whose namespace is part of the package's public name
_NAMESPACED_TYPES = {
    "npm": "@{namespace}/{name}",
    "composer": "{namespace}/{name}",
    "golang": "{namespace}/{name}",
}


def map_package_to_product(package_name: str) -> Optional[str]:
    """
    Map a package, SDK or binary name to its product key.

    Args:
        package_name: Name as it appears in a lock file or on PATH

    Returns:
        The endoflife.date product key, or None for unknown names
    """
    return PRODUCT_MAP.get(package_name)


def map_purl_to_product(purl: Union[str, PackageURL]) -> Optional[str]:
    """
    Map a package URL to its product key using the package's qualified name.

    ``pkg:npm/%40angular/core@17.0.0`` is looked up as ``@angular/core`` and
    ``pkg:composer/laravel/framework@10.0`` as ``laravel/framework``. The
    lookup itself is the same exact match as map_package_to_product.

    Returns:
        The product key, or None for unknown packages or invalid PURLs
    """
    if isinstance(purl, str):
        try:
            purl = PackageURL.from_string(purl)
        except ValueError as e:
            logger.debug(f"Invalid PURL {purl!r}: {e}")
            return None

    if purl.namespace and purl.type in _NAMESPACED_TYPES:
        namespace = purl.namespace.lstrip("@")
        qualified = _NAMESPACED_TYPES[purl.type].format(namespace=namespace, name=purl.name)
        product = map_package_to_product(qualified)
        if product:
            return product

    return map_package_to_product(purl.name)
