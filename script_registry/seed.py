"""
Seed the registry with demo customers and scripts.

Existing rows are left untouched, so running the command twice is harmless.
"""
import asyncio
import logging

from script_registry.core.config import get_settings
from script_registry.core.container import ApplicationContainer
from script_registry.core.logging import configure_logging
from script_registry.modules.common.exceptions import ConflictError
from script_registry.modules.scripts import ScriptCategory, ScriptInput

logger = logging.getLogger(__name__)

DEMO_CUSTOMERS = [
    ("1", "Customer A GmbH"),
    ("2", "Customer B AG"),
    ("3", "Customer C KG"),
    ("4", "Customer D Ltd."),
    ("5", "Customer E Inc."),
]

DEMO_SCRIPTS = [
    ScriptInput(
        name="Install Windows updates",
        command=(
            "if (-not (Get-Module -Name PSWindowsUpdate -ListAvailable)) {\n"
            "    Install-Module -Name PSWindowsUpdate -Force\n"
            "}\n"
            "Import-Module PSWindowsUpdate\n"
            "Install-WindowsUpdate -AcceptAll -AutoReboot"
        ),
        description="Installs every pending Windows update",
        category=ScriptCategory.SECURITY,
        is_global=True,
        auto_enrollment=True,
        customer_ids=["1", "2", "3"],
    ),
    ScriptInput(
        name="Install Adobe Reader",
        command=(
            '$output = "$env:TEMP\\AdobeReader.exe"\n'
            'Invoke-WebRequest -Uri "https://get.adobe.com/reader/" -OutFile $output\n'
            'Start-Process -FilePath $output -ArgumentList "/S" -Wait\n'
            "Remove-Item $output"
        ),
        description="Downloads and silently installs Adobe Reader",
        category=ScriptCategory.SOFTWARE,
        customer_ids=["1", "4"],
    ),
    ScriptInput(
        name="Check network configuration",
        command='ipconfig /all\nnslookup example.com\nTest-NetConnection -ComputerName "example.com" -Port 80',
        description="Runs a basic network diagnosis",
        category=ScriptCategory.CONFIGURATION,
        is_global=True,
        customer_ids=["2", "3", "5"],
    ),
    ScriptInput(
        name="Report CPU temperature",
        command=(
            '$zones = Get-WmiObject -Namespace "root/WMI" -Class "MSAcpi_ThermalZoneTemperature"\n'
            "foreach ($zone in $zones) {\n"
            "    Write-Host (($zone.CurrentTemperature / 10) - 273.15)\n"
            "}"
        ),
        description="Prints the CPU temperature of every thermal zone",
        category=ScriptCategory.COMMAND,
        customer_ids=["3", "5"],
    ),
]


async def seed_database(container: ApplicationContainer) -> tuple[int, int]:
    """Insert the demo data; returns how many customers and scripts were added."""
    await container.startup()
    customers = container.customer_service()
    scripts = container.script_service()

    added_customers = 0
    for customer_id, name in DEMO_CUSTOMERS:
        try:
            await customers.create_customer(customer_id, name)
        except ConflictError:
            logger.info("Customer %s already present, skipping", customer_id)
            continue
        added_customers += 1

    existing_names = {script.name for script in await scripts.list_scripts()}
    added_scripts = 0
    for payload in DEMO_SCRIPTS:
        if payload.name in existing_names:
            logger.info("Script %r already present, skipping", payload.name)
            continue
        await scripts.create_script(payload)
        added_scripts += 1

    return added_customers, added_scripts


async def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    container = ApplicationContainer.from_settings(settings)
    try:
        added_customers, added_scripts = await seed_database(container)
    finally:
        await container.shutdown()
    logger.info("Seeded %d customer(s) and %d script(s)", added_customers, added_scripts)


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
