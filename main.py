"""Entrypoint launching the Textual UI."""

from vimeo_balancer.tui import PreviewApp


def main():
    # Launch the Textual UI
    app = PreviewApp()
    app.run()


if __name__ == "__main__":
    main()
