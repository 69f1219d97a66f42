#!/usr/bin/env python3
"""
Generate a CSV of randomized dengue cases and optionally import it via the API.

Usage:
    # Write 50 cases to cases.csv
    python scripts/generate_test_cases.py --count 50 --output cases.csv

    # Generate and upload to a running API (logs in as the demo user)
    python scripts/generate_test_cases.py --count 20 --send

    # Diagnosis dates spread over the last 30 days
    python scripts/generate_test_cases.py --count 100 --days-max 30 --send
"""

import argparse
import csv
import io
import os
import random
import sys
from datetime import date, timedelta
from pathlib import Path
import requests

COLUMNS = [
    "Patient Name", "Age", "Gender", "Address", "Location",
    "Status", "Contact Number", "Diagnosis Date",
]

GIVEN_NAMES = {
    "Male": ["Rahul", "Amit", "Vikram", "Arjun", "Suresh", "Imran", "Ravi"],
    "Female": ["Priya", "Sita", "Anjali", "Meena", "Kavya", "Fatima", "Lakshmi"],
}
FAMILY_NAMES = ["Verma", "Sharma", "Singh", "Devi", "Nair", "Khan", "Patel", "Reddy"]
STREETS = ["Gandhi Nagar", "Housing Board", "Old Market", "Station Road", "Temple Street"]
LOCATIONS = [
    "Central District", "West Hills PHC", "North Sector Block 4",
    "Rural Block A", "Training District",
]
STATUSES = ["Suspected", "Confirmed", "Recovered", "Critical"]
STATUS_WEIGHTS = [0.4, 0.35, 0.2, 0.05]


def get_api_url():
    """Get API URL from environment variables."""
    host = os.environ.get("API_HOST", "localhost")
    port = os.environ.get("API_PORT", "8000")
    return f"http://{host}:{port}"


def random_case_row(days_min: int = 0, days_max: int = 7) -> list:
    """One CSV row in template column order."""
    gender = random.choice(["Male", "Female"])
    name = f"{random.choice(GIVEN_NAMES[gender])} {random.choice(FAMILY_NAMES)}"
    diagnosis = date.today() - timedelta(days=random.randint(days_min, days_max))

    return [
        name,
        str(random.randint(1, 85)),
        gender,
        f"{random.randint(1, 99)} {random.choice(STREETS)}",
        random.choice(LOCATIONS),
        random.choices(STATUSES, weights=STATUS_WEIGHTS)[0],
        f"+1 555 {random.randint(1000, 9999)}",
        diagnosis.isoformat(),
    ]


def generate_csv(count: int, days_min: int = 0, days_max: int = 7) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(COLUMNS)
    for _ in range(count):
        writer.writerow(random_case_row(days_min, days_max))
    return buffer.getvalue()


def login(api_url: str, user_id: str, password: str) -> str:
    """Log in and return the session token."""
    response = requests.post(
        f"{api_url}/api/v1/auth/login",
        json={"user_id": user_id, "password": password},
        timeout=10
    )
    response.raise_for_status()
    return response.json()["token"]


def send_csv_to_api(csv_text: str, token: str, api_url: str) -> dict:
    """
    Upload the CSV to the import endpoint.

    Returns:
        API response as dictionary
    """
    try:
        response = requests.post(
            f"{api_url}/api/v1/cases/import",
            files={"file": ("cases.csv", csv_text.encode("utf-8"), "text/csv")},
            headers={"X-Session-Token": token},
            timeout=30
        )
        response.raise_for_status()
        return response.json()
    except requests.exceptions.RequestException as e:
        print(f"✗ API request failed: {e}")
        raise


def health_check(api_url: str) -> bool:
    """Check if the API is available."""
    try:
        response = requests.get(f"{api_url}/health", timeout=5)
        if response.status_code == 200:
            print(f"API healthy at {api_url}")
            return True
        print(f"API unhealthy: {response.status_code}")
        return False
    except requests.exceptions.RequestException as e:
        print(f"Cannot reach API at {api_url}: {e}")
        return False


def main():
    parser = argparse.ArgumentParser(
        description="Generate randomized dengue cases as CSV and optionally import them"
    )
    parser.add_argument("--count", type=int, default=10, help="Number of cases (default: 10)")
    parser.add_argument("--days-min", type=int, default=0, help="Minimum days since diagnosis")
    parser.add_argument("--days-max", type=int, default=7, help="Maximum days since diagnosis")
    parser.add_argument("--output", type=Path, help="Write the CSV to this file")
    parser.add_argument("--send", action="store_true", help="Import the cases via the API")
    parser.add_argument("--user-id", default="9894585495", help="Login phone number (default: demo user)")
    parser.add_argument("--password", default="password123", help="Login password")

    args = parser.parse_args()

    csv_text = generate_csv(args.count, args.days_min, args.days_max)

    if args.output:
        args.output.write_text(csv_text, encoding="utf-8")
        print(f"✓ Wrote {args.count} cases to {args.output}")
    elif not args.send:
        sys.stdout.write(csv_text)

    if args.send:
        api_url = get_api_url()
        if not health_check(api_url):
            print("\nAPI not available. Start it with:")
            print("   dengue-pro-api")
            sys.exit(1)

        token = login(api_url, args.user_id, args.password)
        result = send_csv_to_api(csv_text, token, api_url)
        print(f"✓ Imported {result['imported']} cases")


if __name__ == "__main__":
    main()
