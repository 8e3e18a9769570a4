"""Wiring the error log into a server's startup.

Run with::

    ERRLOG_JSON=true python docs/examples/server_startup.py

The logger is built once, configured before any worker starts, and passed
to everything that needs it.
"""

from __future__ import annotations

import sys

from mp_errlog import Logger
from mp_errlog.kernel.errors import BucketNotFound, StorageFull, wrap


class ObjectLayer:
    def __init__(self, log: Logger) -> None:
        self._log = log
        self._buckets = {"photos"}

    def head_bucket(self, bucket: str) -> None:
        if bucket not in self._buckets:
            raise BucketNotFound(bucket)

    def put_object(self, bucket: str, name: str) -> None:
        try:
            self.head_bucket(bucket)
            raise StorageFull()
        except (BucketNotFound, StorageFull) as exc:
            # Missing buckets are dropped by the logger; the full disk is reported.
            self._log.error(wrap(exc, "put object"), "unable to write %s/%s", bucket, name)


def main() -> None:
    log = Logger.from_settings()
    if "--quiet" in sys.argv:
        log.enable_quiet()

    log.println("starting object layer")
    layer = ObjectLayer(log)
    layer.put_object("videos", "a.mp4")
    layer.put_object("photos", "a.jpg")
    log.fatal(StorageFull(), "unable to initialize storage")


if __name__ == "__main__":
    main()
