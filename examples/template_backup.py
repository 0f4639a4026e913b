#!/usr/bin/env python3
"""Template Backup Example

Copies note templates from one Zen server to another through an export
file.

Usage:
    1. Set ZEN_BASE_URL (source) and TARGET_ZEN_URL, or edit the values below
    2. Run: python template_backup.py

Environment Variables (optional):
    ZEN_BASE_URL: Source server (also read from .env)
    ZEN_API_TOKEN: Source token, if the server requires one
    TARGET_ZEN_URL: Server to import into
    TARGET_ZEN_TOKEN: Target token, if required
"""

import asyncio
import os
from pathlib import Path

from zen_kit import (
    AsyncClient,
    ConfigurationError,
    FileDelivery,
    FileInput,
    StatusReporter,
    TemplateExporter,
    TemplateImporter,
    ZenError,
    create_config,
    load_config,
)

TARGET_URL = os.getenv("TARGET_ZEN_URL", "http://localhost:8081")
TARGET_TOKEN = os.getenv("TARGET_ZEN_TOKEN")

BACKUP_DIR = Path("./template_backups")


async def main() -> None:
    """Export templates from the source server and import them into the target."""
    print("Starting template backup")
    print("=" * 60)

    try:
        source_config = load_config()
        target_config = create_config(TARGET_URL, TARGET_TOKEN)
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        return

    status = StatusReporter(sink=lambda message: print(f"  {message}"))

    # Step 1: Export from source
    print(f"\nExporting from {source_config.base_url}...")
    try:
        async with AsyncClient(source_config) as source_client:
            templates = await source_client.list_templates()
    except ZenError as e:
        print(f"Could not list templates: {e}")
        return

    exporter = TemplateExporter(status, FileDelivery(BACKUP_DIR))
    if not exporter.can_export(templates):
        print("  No templates to export")
        return

    backup_file = exporter.export(templates)
    if backup_file is None:
        return

    # Step 2: Import to target
    print(f"\nImporting to {TARGET_URL}...")
    file_input = FileInput()
    file_input.select(backup_file)

    async with AsyncClient(target_config) as target_client:
        importer = TemplateImporter(target_client, status)
        result = await importer.import_file(
            file_input,
            on_complete=lambda: print("  Target template list refreshed"),
        )

    if not result.success and result.failure is not None:
        print(f"  {result.failure.message}")
        print(f"  {result.imported} templates were created before the failure")
        print(f"  Backup kept at {backup_file}")
        return

    print("\nBackup complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
