from screenerx.console import console


def verbose_callback(value: bool) -> None:
    """Unmute the shared console when --verbose is passed."""
    if value:
        console.quiet = False
