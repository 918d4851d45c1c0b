#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from stoic.config.loader import CONFIG_FILENAME, ConfigLoader
from stoic.config.validation import ConfigValidator, ValidationError
from stoic.errors import ConfigurationError


def validate_config_dir(config_dir: Path) -> List[ValidationError]:
    """Validate the merged configuration for a config directory."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()
    config_file = config_dir / CONFIG_FILENAME

    print(f"🔍 Validating Stoic configuration in {config_dir}...")

    if not config_file.exists():
        print(f"ℹ️  No {CONFIG_FILENAME} found, defaults will be used")

    try:
        errors = validate_config_dir(config_dir)
    except ConfigurationError as e:
        print(f"❌ Error loading configuration: {e}")
        sys.exit(1)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    loader = ConfigLoader.create(config_dir)
    params = loader.sanitizer_params()
    logging_params = loader.logging_params()
    print("✅ Configuration is valid")
    print(f"  • failure_name_prefix: {params.failure_name_prefix}")
    print(f"  • max_depth: {params.max_depth}")
    print(f"  • log_cycles: {params.log_cycles}")
    print(f"  • include_trace: {params.include_trace}")
    print(f"  • logging.level: {logging_params.level}")
    print(f"  • logging.format_json: {logging_params.format_json}")
    sys.exit(0)


if __name__ == "__main__":
    main()
