#!/usr/bin/env python3
"""
Endpoint Lookup Demo for bluemix-endpoints package.

This script demonstrates new_endpoint_locator() by resolving every service
endpoint for a region, showing which URLs come from override environment
variables and which services have no endpoint in that region.

Usage:
    python examples/endpoint_lookup_demo.py [region]
"""

import sys

from bluemix_endpoints import (
    EndpointLocator,
    Service,
    known_regions,
    new_endpoint_locator,
)


def print_separator(title: str) -> None:
    """Print a formatted section separator."""
    print(f"\n{'=' * 60}")
    print(f" {title}")
    print(f"{'=' * 60}")


def demo_service_lookups(locator: EndpointLocator) -> None:
    """Demonstrate resolving each service with the non-raising lookup."""
    print_separator(f"🔎 SERVICE ENDPOINTS FOR {locator.region!r}")

    for service in Service:
        url, error = locator.lookup(service)
        if error is not None:
            print(f"❌ {service.value:8} {error} [{error.code}]")
            continue
        print(f"✅ {service.value:8} {url}")


def demo_resolved_records(locator: EndpointLocator) -> None:
    """Demonstrate the machine-readable records returned by resolve()."""
    print_separator("🧾 RESOLVED RECORDS")

    records = locator.resolve()
    if not records:
        print("⚠️  No services resolve for this region")
        return

    for record in records:
        print(f"   {record.model_dump_json()}")

    overridden = [r.service for r in records if r.source == "environment"]
    print(f"\n🔧 Overridden from environment: {', '.join(overridden) or 'none'}")


def demo_coverage() -> None:
    """Show which regions the built-in table covers per service."""
    print_separator("🗺️  BUILT-IN REGION COVERAGE")

    for service in Service:
        print(f"   {service.value:8} {', '.join(known_regions(service))}")


def main() -> None:
    """Run the demo for the region given on the command line."""
    region = sys.argv[1] if len(sys.argv) > 1 else "us-south"
    locator = new_endpoint_locator(region)

    demo_service_lookups(locator)
    demo_resolved_records(locator)
    demo_coverage()


if __name__ == "__main__":
    main()
