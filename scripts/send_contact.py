#!/usr/bin/env python3
"""
Submit one contact form to a running landing API, the way the page does.

Usage:
    python3 scripts/send_contact.py --first-name John --last-name Doe \
        --email john@example.com --message "Hello there, interested in the data center."

Start the server first with: uvicorn landing_api.main:app --reload
"""

import argparse
import asyncio
import logging
import sys

from landing_api.client.form_controller import ContactFormController, Toast

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Send a contact form submission")
    parser.add_argument("--url", default="http://localhost:8000/api/v1/contact", help="Contact endpoint URL")
    parser.add_argument("--first-name", required=True)
    parser.add_argument("--last-name", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument("--message", required=True)
    return parser.parse_args(argv)


def print_toast(toast: Toast):
    marker = "✅" if toast.kind == "success" else "❌"
    print(f"{marker} {toast.title}")
    print(f"   {toast.description}")


async def main(argv=None, client=None) -> int:
    """Main function"""
    args = parse_args(argv)

    form = ContactFormController(args.url, notify=print_toast, client=client)
    form.set_value("firstName", args.first_name)
    form.set_value("lastName", args.last_name)
    form.set_value("email", args.email)
    form.set_value("message", args.message)

    toast = await form.submit()
    if toast is None:
        for field, error in form.errors.items():
            logger.error(f"{field}: {error}")
        return 2

    return 0 if toast.kind == "success" else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
