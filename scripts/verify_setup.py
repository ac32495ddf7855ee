"""Verify that the setup is correct before browsing characters."""
import asyncio
import os
import sys
from dotenv import load_dotenv
from rickandmorty.application.character_repository import CachedCharacterRepository
from rickandmorty.domain.result import Success
from rickandmorty.infrastructure.rest_client import DEFAULT_BASE_URL, RickAndMortyRestClient

# Load environment variables from .env or env file
load_dotenv('.env') or load_dotenv('env')


def check_environment_variables():
    """Check that optional settings parse."""
    print("Checking environment variables...")

    optional_vars = ["RICK_AND_MORTY_API_URL", "REQUEST_TIMEOUT", "PAGES_TO_LOAD", "CHARACTER_ID", "LOG_LEVEL"]

    for var in optional_vars:
        if os.getenv(var):
            print(f"   {var}: {os.getenv(var)}")

    try:
        float(os.getenv("REQUEST_TIMEOUT", "10"))
        int(os.getenv("PAGES_TO_LOAD", "1"))
        if os.getenv("CHARACTER_ID"):
            int(os.getenv("CHARACTER_ID"))
    except ValueError as e:
        print(f"❌ Invalid numeric setting: {e}")
        return False

    print("✅ Environment variables look valid")
    return True


async def _lookup_first_character() -> bool:
    base_url = os.getenv("RICK_AND_MORTY_API_URL", DEFAULT_BASE_URL)
    timeout = float(os.getenv("REQUEST_TIMEOUT", "10"))

    api = RickAndMortyRestClient(base_url=base_url, timeout=timeout)
    repository = CachedCharacterRepository(api)
    try:
        result = await repository.get_character_by_id(1)
    finally:
        await api.close()

    if isinstance(result, Success):
        print(f"✅ API reachable at {base_url} (character #1 is {result.data.name})")
        return True

    print(f"❌ API check failed: {result.message}")
    return False


def check_api_connection():
    """Check that the API answers a single-character lookup."""
    print("\nChecking API connection...")
    return asyncio.run(_lookup_first_character())


def main():
    """Run all verification checks."""
    print("=" * 60)
    print("Rick and Morty Browser - Setup Verification")
    print("=" * 60)

    checks = [
        ("Environment Variables", check_environment_variables),
        ("API Connection", check_api_connection),
    ]

    results = {}
    for name, check_func in checks:
        try:
            results[name] = check_func()
        except Exception as e:
            print(f"❌ {name} check failed with exception: {e}")
            results[name] = False

    print("\n" + "=" * 60)
    print("Verification Summary")
    print("=" * 60)

    for name, passed in results.items():
        status = "✅ PASS" if passed else "❌ FAIL"
        print(f"{status}: {name}")

    if all(results.values()):
        print("\n✅ All checks passed! Ready to browse.")
        print("\nNext steps:")
        print("  python browse_characters.py")
        sys.exit(0)
    else:
        print("\n❌ Some checks failed. Please fix the issues above.")
        print("\nCommon solutions:")
        print("  - Check your network connection")
        print("  - Set RICK_AND_MORTY_API_URL if you use a mirror of the API")
        sys.exit(1)


if __name__ == "__main__":
    main()
