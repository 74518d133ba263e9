"""
Example entrypoint for the Nominatim client.

Usage:
    python main.py

Set NOMINATIM_USER_AGENT to identify your application, and NOMINATIM_BASE_URL
to query a self-hosted server instead of the public instance.
"""
import logging
import os

from nominatim_client import Client, IdentificationMethod, NominatimError

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)

USER_AGENT = os.getenv("NOMINATIM_USER_AGENT", "NominatimClientExample/1.0")
BASE_URL = os.getenv("NOMINATIM_BASE_URL")


def main():
    """
    Run each API operation once and print the results.
    """
    try:
        with Client(IdentificationMethod.from_user_agent(USER_AGENT), base_url=BASE_URL) as client:
            print("---- status ----")
            status = client.status()
            print(status.message)

            print("---- search ----")
            for place in client.search("statue of liberty"):
                print(place.display_name)

            print("---- reverse ----")
            place = client.reverse("40.689249", "-74.044500")
            print(place.display_name)

            print("---- lookup ----")
            for place in client.lookup(["R146656", "W50637691"]):
                print(place.display_name)

        return 0
    except NominatimError as e:
        print(f"An error occurred in the main function: {str(e)}")
        return 1


if __name__ == "__main__":
    exit_code = main()
    print(f"Exiting with code {exit_code}")
