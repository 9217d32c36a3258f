"""
makhtut init command - Create the configuration file.
"""

from infra.config import AppConfig, ConfigManager, get_home


def cmd_init(args):
    """Create config.yaml with defaults."""
    home = get_home()
    manager = ConfigManager(home)

    if manager.exists() and not args.force:
        print(f"✗ Config already exists at: {manager.config_path}")
        print("  Use --force to overwrite")
        return

    config = AppConfig()
    manager.save(config)
    print(f"✓ Created config at: {manager.config_path}")

    print("\nConfiguration summary:")
    print(f"  Home: {home}")
    print(f"  Max tokens per batch: {config.translation.max_tokens}")
    print(f"  Log level: {config.logging.level}")
    print(f"  Log directory: {config.resolve_log_dir(home)}")
