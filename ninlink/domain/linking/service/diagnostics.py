"""Log-safe rendering of exceptions raised inside the linking checks.

Host exceptions may quote the username they failed on, and provisioned
usernames are the NiN, so messages never reach the log unredacted.
"""

import os
import traceback

from ninlink.domain.linking.model.value import redact_identity_number


def describe_fault(exc: BaseException, identity_number: str | None = None) -> str:
    """Render an exception as type, message and raising frame.

    With a known identity number every occurrence of it in the message is
    masked. Without one the message is dropped and only the type and frame
    are kept.
    """
    frames = traceback.extract_tb(exc.__traceback__)
    where = ""
    if frames:
        frame = frames[-1]
        where = f" in {frame.name} ({os.path.basename(frame.filename)}:{frame.lineno})"

    if identity_number is None:
        return f"{type(exc).__name__}{where}"
    return f"{type(exc).__name__}: {redact_identity_number(str(exc), identity_number)}{where}"
