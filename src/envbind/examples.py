"""
Example service configuration for demos and tests.

A small but realistic tree: scalar settings at the root, nested sections,
a list of replica sections that all read the same keys, and a private
field the binder must leave alone.

With prefix "app" the tree reads:
    APP_NAME, APP_DEBUG, APP_WORKERS,
    APP_HTTP_HOST, APP_HTTP_PORT, APP_HTTP_TLS_ENABLED,
    APP_DATABASE_URL, APP_DATABASE_POOL_SIZE, APP_DATABASE_READ_ONLY,
    APP_REPLICAS_URL, APP_REPLICAS_WEIGHT
"""
from dataclasses import dataclass, field
from typing import List

EXAMPLE_PREFIX = "app"


@dataclass
class HttpConfig:
    host: str = "0.0.0.0"
    port: int = 8080
    tlsEnabled: bool = False


@dataclass
class DatabaseConfig:
    url: str = "postgres://localhost:5432/app"
    poolSize: int = 5
    read_only: bool = False


@dataclass
class ReplicaConfig:
    url: str = ""
    weight: int = 1


@dataclass
class ServiceConfig:
    name: str = "envbind-demo"
    debug: bool = False
    workers: int = 4
    http: HttpConfig = field(default_factory=HttpConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    replicas: List[ReplicaConfig] = field(default_factory=list)
    _loaded_from: str = "defaults"


def build_example_service_config(replica_count: int = 2) -> ServiceConfig:
    config = ServiceConfig()
    config.replicas = [
        ReplicaConfig(url=f"postgres://replica-{i}:5432/app") for i in range(1, replica_count + 1)
    ]
    return config
