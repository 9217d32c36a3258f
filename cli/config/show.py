"""
makhtut config show command - Display configuration.
"""

import json

from infra.config import ConfigManager, get_home


def cmd_config_show(args):
    """Show configuration."""
    home = get_home()
    manager = ConfigManager(home)
    config = manager.load()

    if args.json:
        print(json.dumps(config.model_dump(mode="json"), indent=2, ensure_ascii=False))
        return

    source = manager.config_path if manager.exists() else "(defaults, no config.yaml)"
    print(f"\n📋 Configuration")
    print(f"   Path: {source}\n")

    print("Translation:")
    print(f"  max_tokens: {config.translation.max_tokens}")
    first_line = config.translation.prompt.splitlines()[0] if config.translation.prompt else ""
    print(f"  prompt: {first_line} ...")

    print("\nLogging:")
    print(f"  level: {config.logging.level}")
    print(f"  log_dir: {config.resolve_log_dir(home)}")
    print(f"  console: {config.logging.console}")
    print(f"  json_output: {config.logging.json_output}")
    print()
