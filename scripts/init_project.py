#!/usr/bin/env python3
"""
Initialize the fleet rules project.

This script:
- Checks the Python version
- Loads .env and reports which optional API keys are set
- Validates config.yaml and llms.json, including every rule profile
- Checks that required packages import
"""

import json
import os
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv

CONFIG_DIR = Path(os.getenv("FLEET_RULES_CONFIG_DIR", "config"))
LLM_AGENTS = ["assignment"]


def check_python_version() -> bool:
    """Verify Python version is 3.12 or higher."""
    if sys.version_info < (3, 12):
        print(f"❌ Python 3.12+ required. Current version: {sys.version}")
        return False
    print(f"✅ Python version: {sys.version_info.major}.{sys.version_info.minor}")
    return True


def check_env() -> bool:
    """Load .env if present; API keys are optional (LLM explanations only)."""
    if Path(".env").exists():
        load_dotenv()
        print("✅ .env loaded")
    else:
        print("⚠️  No .env file (cp .env.example .env to enable LLM explanations)")

    missing = []
    for var in ["ANTHROPIC_API_KEY", "OPENAI_API_KEY"]:
        value = os.getenv(var)
        if not value or value.startswith("your_"):
            missing.append(var)

    if missing:
        print(f"⚠️  Not set: {', '.join(missing)} - explanations fall back to rule text")
    else:
        print("✅ LLM API keys set")

    return True


def check_config_files() -> bool:
    """Validate config.yaml and llms.json parse and contain the expected sections."""
    config_path = CONFIG_DIR / "config.yaml"
    llms_path = CONFIG_DIR / "llms.json"

    for path in (config_path, llms_path):
        if not path.exists():
            print(f"❌ Missing config file: {path}")
            return False

    try:
        with open(config_path) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        print(f"❌ Error parsing {config_path}: {e}")
        return False

    if not config:
        print(f"❌ {config_path} is empty")
        return False

    for section in ("assignment", "pricing"):
        if section not in config:
            print(f"⚠️  No '{section}' section - built-in defaults will be used")

    try:
        with open(llms_path) as f:
            llms = json.load(f)
    except json.JSONDecodeError as e:
        print(f"❌ Error parsing {llms_path}: {e}")
        return False

    missing_agents = [a for a in LLM_AGENTS if a not in llms.get("agent_assignments", {})]
    if missing_agents:
        print(f"❌ llms.json has no entry for: {', '.join(missing_agents)}")
        return False

    print("✅ Config files are valid")
    return True


def check_rule_profiles() -> bool:
    """Build every assignment and pricing profile to catch invalid values."""
    from pydantic import ValidationError

    from fleet_rules.core.config import ConfigManager

    manager = ConfigManager(config_dir=CONFIG_DIR)

    for section, loader in (
        ("assignment", manager.get_assignment_rules),
        ("pricing", manager.get_pricing_rules),
    ):
        profiles = manager.business_config.get(section, {}).get("profiles", {}) or {}
        for profile in [None, *profiles]:
            try:
                loader(profile)
            except ValidationError as e:
                print(f"❌ Invalid {section} profile '{profile or 'default'}': {e}")
                return False
        print(f"✅ {section}: default + {len(profiles)} profile(s) valid")

    return True


def test_imports() -> bool:
    """Test that critical packages can be imported."""
    required_packages = [
        "pydantic",
        "pydantic_settings",
        "structlog",
        "yaml",
        "dotenv",
        "fleet_rules",
    ]

    missing = []
    for package in required_packages:
        try:
            __import__(package)
        except ImportError:
            missing.append(package)

    if missing:
        print(f"❌ Missing packages: {', '.join(missing)}")
        print("   Run: pip install -e '.[test]'")
        return False

    print("✅ All required packages installed")
    return True


def main() -> int:
    """Run all initialization checks."""
    print("=" * 60)
    print("Fleet Rules - Initialization")
    print("=" * 60)

    checks = [
        ("Python version", check_python_version),
        ("Package imports", test_imports),
        ("Environment", check_env),
        ("Configuration files", check_config_files),
        ("Rule profiles", check_rule_profiles),
    ]

    passed = 0
    failed = 0

    for name, check_func in checks:
        print(f"\nChecking {name}...")
        if check_func():
            passed += 1
        else:
            failed += 1
            break

    print("\n" + "=" * 60)
    print(f"Results: {passed} passed, {failed} failed")
    print("=" * 60)

    if failed:
        print("\n❌ Some checks failed. Please fix the issues above.")
        return 1

    print("\nNext steps:")
    print("  pytest")
    print("  python -m fleet_rules.agents.assignment")
    print("  python -m fleet_rules.agents.pricing")
    return 0


if __name__ == "__main__":
    sys.exit(main())
