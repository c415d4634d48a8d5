"""Process entry point: validate config, wire the bot, run until stopped."""

import sys

from groq_bridge.adapters.discord.adapter import DiscordBotAdapter
from groq_bridge.adapters.llm.groq_client import GroqClient
from groq_bridge.config import AppConfig, ConfigError


def _log(msg: str):
    print(msg, file=sys.stderr)


def load_config() -> AppConfig:
    """Read and validate configuration, exiting the process if it is unusable."""
    try:
        return AppConfig.from_env().validate()
    except ConfigError as e:
        _log(f"❌ {e}")
        sys.exit(1)


def create_bot(config: AppConfig) -> DiscordBotAdapter:
    completion = GroqClient(config)
    _log(f"[groq-bridge] completion model: {config.groq_model}")
    return DiscordBotAdapter(completion)


def main():
    config = load_config()
    bot = create_bot(config)
    # client.run() installs its own SIGINT/SIGTERM handling and closes the gateway
    bot.run(config.discord_token)
    _log("[groq-bridge] Shutting down...")


if __name__ == "__main__":
    main()
