"""
makhtut config set command - Set configuration values.
"""

import json

from pydantic import ValidationError

from infra.config import ConfigManager, get_home, reload_config


def cmd_config_set(args):
    """Set a configuration value."""
    manager = ConfigManager(get_home())

    key = args.key
    parsed_value = _parse_value(args.value)

    # Handle nested keys (e.g., "translation.max_tokens")
    parts = key.split('.')

    if len(parts) == 1:
        print(f"✗ Cannot set top-level key '{key}' directly")
        print("  Use nested keys like 'translation.max_tokens' or 'logging.level'")
        return

    updates = {}
    current = updates
    for part in parts[:-1]:
        current[part] = {}
        current = current[part]
    current[parts[-1]] = parsed_value

    try:
        config = manager.update(updates)
    except ValidationError as e:
        print(f"✗ Failed to set {key}: {e}")
        return

    reload_config()
    print(f"✓ Set {key} = {parsed_value}")

    result = config.model_dump()
    for part in parts:
        result = result.get(part, {})
    print(f"  Current value: {result}")


def _parse_value(value: str):
    """
    Parse a string value into appropriate Python type.

    Handles:
    - Numbers (int, float)
    - Booleans (true, false)
    - JSON arrays and objects
    - Strings (default)
    """
    if value.lower() == 'true':
        return True
    if value.lower() == 'false':
        return False

    try:
        if '.' in value:
            return float(value)
        return int(value)
    except ValueError:
        pass

    if value.startswith('[') or value.startswith('{'):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            pass

    return value
