#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from decimal_ta.config.loader import ConfigLoader
from decimal_ta.config.validation import ConfigValidator, ValidationError
from decimal_ta.errors import IndicatorError


def validate_config_dir(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate settings and indicator definitions of a config directory."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    config["indicators"] = loader.load_indicator_definitions()
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating configuration in {loader.config_dir}...")

    try:
        errors = validate_config_dir(loader.config_dir)
    except IndicatorError as e:
        print(f"❌ Error loading configuration: {e}")
        sys.exit(1)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    for name, indicator in loader.load_indicators().items():
        print(f"✅ {name} ({indicator.name}) requires {indicator.count()} samples")

    print(f"\n🎉 All configuration validation passed!")
    sys.exit(0)


if __name__ == "__main__":
    main()
