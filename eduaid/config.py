"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Type-safe configuration sourced from .env / environment."""

    # Prompt responder
    llm_backend: str = "gemini"  # gemini | ollama

    # Gemini
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_timeout_seconds: int = 60

    # Ollama
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "llama3.2"
    ollama_timeout_seconds: int = 60

    # /generate relay used by the CLI
    relay_url: str = "http://localhost:5000/generate"
    relay_timeout_seconds: int = 90

    # Key-value store
    store_backend: str = "file"  # file | memory
    store_path: str = "./.eduaid_store.json"
    storage_key_prefix: str = "eduaid_"

    # Roadmap behaviour
    roadmap_fallback_text: str = "Sorry, no roadmap generated."
    generate_error_message: str = "Error generating roadmap! Please try again later."
    reset_progress_on_generate: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
