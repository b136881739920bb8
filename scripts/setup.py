#!/usr/bin/env python3
"""
Setup script for the Radix palette generator.
Installs the package, Playwright and the Chromium browser it drives.
"""

import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def run_command(cmd, description):
    """Run a command and report status."""
    print(f"\n📦 {description}...")
    try:
        result = subprocess.run(cmd, check=True, capture_output=True, text=True)
        print(f"✅ {description} completed")
        if result.stdout:
            print(result.stdout)
        return True
    except subprocess.CalledProcessError as e:
        print(f"❌ {description} failed")
        if e.stderr:
            print(e.stderr)
        return False


def main():
    print("🚀 Setting up the Radix palette generator...")

    if sys.version_info < (3, 8):
        print("❌ Python 3.8+ required")
        sys.exit(1)

    dev = "--dev" in sys.argv[1:]
    target = f"{ROOT}[test]" if dev else str(ROOT)
    if not run_command(
        [sys.executable, "-m", "pip", "install", "-e", target],
        "Installing radix-palette" + (" with test extras" if dev else ""),
    ):
        sys.exit(1)

    # The extractor launches Chromium; --offline runs work without it.
    if not run_command(
        [sys.executable, "-m", "playwright", "install", "chromium"],
        "Installing Chromium browser",
    ):
        sys.exit(1)

    print("\n✅ Setup complete! You can now run:")
    print("   radix-palette '#3B82F6' analogous --output ./palette")


if __name__ == "__main__":
    main()
