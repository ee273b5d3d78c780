# backend/geotrack/utils/background.py
"""Fire-and-forget execution of work outside the request thread."""
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

class BackgroundDispatcher:
    """Run callables on a worker pool inside an application context.

    The caller never waits for the result. Any exception raised by the
    callable is logged and dropped; nothing is retried. With
    ``TRANSITION_DISPATCH_INLINE`` the callable runs on the calling thread
    in the caller's application context instead.
    """

    def __init__(self, app=None):
        self.app = None
        self.executor = None
        self.inline = False
        if app is not None:
            self.init_app(app)

    def init_app(self, app) -> None:
        # Replaces any pool left by an earlier app
        self.shutdown(wait=False)
        self.app = app
        self.inline = app.config.get('TRANSITION_DISPATCH_INLINE', False)
        self.executor = None
        if not self.inline:
            self.executor = ThreadPoolExecutor(
                max_workers=app.config.get('TRANSITION_WORKERS', 4),
                thread_name_prefix='geotrack-task'
            )
        app.extensions['dispatcher'] = self

    def submit(self, fn: Callable, *args, **kwargs) -> Optional[Future]:
        """Schedule ``fn`` and return immediately."""
        if self.inline:
            self._call(fn, *args, **kwargs)
            return None
        return self.executor.submit(self._run, fn, *args, **kwargs)

    def _run(self, fn: Callable, *args, **kwargs) -> None:
        from geotrack import db

        with self.app.app_context():
            try:
                self._call(fn, *args, **kwargs)
            finally:
                db.session.remove()

    def _call(self, fn: Callable, *args, **kwargs) -> None:
        from geotrack import db

        try:
            fn(*args, **kwargs)
        except Exception as e:
            db.session.rollback()
            self.app.logger.error(f'Background task {getattr(fn, "__name__", fn)} failed: {e}')

    def shutdown(self, wait: bool = True) -> None:
        if self.executor is not None:
            self.executor.shutdown(wait=wait)
