"""Entry point for running the Teamboard service via `python -m teamboard`."""

from teamboard import TeamboardService
from teamboard.core.config import get_teamboard_config


def main():
    url = get_teamboard_config().TEAMBOARD.URL

    print(f"Starting Teamboard service at {url}...")
    print("Press Ctrl+C to stop.")

    # The worker builds its own config from TEAMBOARD__* env vars, DEBUG/LOG_LEVEL included.
    TeamboardService.launch(url=url, block=True)


if __name__ == "__main__":
    main()
