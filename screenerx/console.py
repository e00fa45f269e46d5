from rich.console import Console

# quiet until --verbose turns it on
console = Console(quiet=True)
