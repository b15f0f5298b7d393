"""Default delivery collaborators: save an .ics file, open a link."""

import logging
import os
import tempfile
import webbrowser
from pathlib import Path
from typing import Union

from workshopcal.exceptions.errors import DeliveryFailed

logger = logging.getLogger(__name__)


def open_in_browser(url: str) -> None:
    """Open the calendar link in a new browser tab.

    Raises:
        DeliveryFailed: If no browser could be launched.
    """
    if not webbrowser.open_new_tab(url):
        raise DeliveryFailed("link", "no web browser could be opened")
    logger.info("Opened calendar link in browser")


class DirectorySaver:
    """Save-file collaborator that writes artifacts into a directory.

    The content is staged in a temporary file next to the target and moved
    into place, so a half-written .ics is never left under the final name.
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory).expanduser()

    def __call__(self, filename: str, content: bytes, mime_type: str) -> Path:
        if Path(filename).name != filename:
            raise DeliveryFailed("file", f"refusing to write outside {self.directory}: {filename!r}")

        self.directory.mkdir(parents=True, exist_ok=True)
        target = self.directory / filename

        tf = tempfile.NamedTemporaryFile(
            mode="wb",
            delete=False,
            dir=self.directory,
            prefix=".",
            suffix=".ics.part",
        )
        try:
            with tf:
                tf.write(content)
            os.replace(tf.name, target)
        finally:
            # Only still present when writing or the move failed
            if os.path.exists(tf.name):
                os.unlink(tf.name)

        logger.info("Saved %s (%s, %d bytes)", target, mime_type, len(content))
        return target
