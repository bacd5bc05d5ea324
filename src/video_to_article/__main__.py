"""Allow `python -m video_to_article`."""

from .cli import main

if __name__ == "__main__":
    main()
