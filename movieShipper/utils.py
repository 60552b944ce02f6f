from datetime import datetime

from movieShipper.settings import LOG_PATH


def log_debug(message: str) -> None:
    """Append timestamped message to the log file."""
    LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().isoformat(timespec="seconds")
    with LOG_PATH.open("a", encoding="utf-8") as f:
        f.write(f"[{ts}] {message}\n")


def print_progress_bar_cmdln(
    iteration: int,
    total: int,
    prefix: str = "",
    suffix: str = "",
    length: int = 40,
) -> None:
    """
    Display or update a text-based progress bar in the console.

    :param iteration: current iteration (0-based or 1-based is okay)
    :param total: total number of iterations
    :param prefix: text to display before the bar
    :param suffix: text to display after the bar
    :param length: character width of the bar
    """
    if total <= 0:
        return

    fraction = iteration / float(total)
    filled_length = int(length * fraction)
    bar = "█" * filled_length + "-" * (length - filled_length)
    percent = round(100 * fraction, 1)
    print(f"\r{prefix} |{bar}| {percent}% {suffix}", end="\r")
    if iteration >= total:
        print()
