from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "postgresql+asyncpg://postgres:postgres@db:5432/eatmore"
    log_level: str = "INFO"

    # GraphQL
    graphql_path: str = "/graphql"
    graphiql_enabled: bool = True

    # Startup
    seed_on_startup: bool = True

    # Observability
    tracing_enabled: bool = True
    otlp_endpoint: str = "http://jaeger:4318/v1/traces"

    model_config = {"env_file": ".env"}


settings = Settings()
