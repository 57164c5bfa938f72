"""``python -m livedev`` — serve ./public with the default configuration."""

from livedev.app import DevServer


def main() -> None:
    DevServer().run()


if __name__ == "__main__":
    main()
