from .cli import app


def main() -> None:
    app(prog_name="idcheck")


if __name__ == "__main__":
    main()
