"""Console frontend for the person CRUD template.

This module plays the part of the template's single page: a form with
first name, last name and id fields, a list of people, the text of
the last response, and a status line telling whether the backend is
reachable and how long a ping takes.

:class:`HomeView` holds the page state and the handlers behind each
button.  All network traffic goes through :class:`person_client.PersonAPI`,
so the handlers never deal with exceptions; they only look at the
``success`` flag of each envelope.

While a view is mounted, a :class:`PingLoop` pings the backend every
second in a background thread.  Unmounting the view (or leaving its
``with`` block) stops the loop.

Running the module starts an interactive shell::

    python person_console.py --base-url http://localhost:3001/api

Type ``help`` at the prompt for the list of commands.
"""

from __future__ import annotations

import argparse
import json
import logging
import shlex
import threading
import time
from typing import Any, Callable, Dict, List, Optional

from person_client import API_URL, PersonAPI


logger = logging.getLogger(__name__)


class PingLoop:
    """Call ``func`` every ``interval`` seconds until stopped.

    The loop runs in a daemon thread.  :meth:`stop` wakes the thread,
    waits for it to finish and may be called any number of times.
    """

    def __init__(self, func: Callable[[], Any], interval: float = 1.0) -> None:
        self.func = func
        self.interval = interval
        self._stopped = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        # Restarting replaces any previous loop.
        self.stop()
        self._stopped.clear()
        self._thread = threading.Thread(target=self._run, name="ping-loop", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stopped.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def _run(self) -> None:
        while not self._stopped.wait(self.interval):
            try:
                self.func()
            except Exception:
                logger.exception("Ping loop callback failed")


class HomeView:
    """State and handlers of the home page."""

    def __init__(
        self,
        api: PersonAPI,
        ping_interval: float = 1.0,
        ping_api: Optional[PersonAPI] = None,
    ) -> None:
        self.api = api
        # The ping loop runs in its own thread and therefore uses its own
        # client (and session) unless one is given.
        self.ping_api = ping_api if ping_api is not None else api.fork()

        # State specific to a single person
        self.id: Any = ""
        self.first_name = ""
        self.last_name = ""

        # State for all people
        self.people: List[Dict[str, Any]] = []

        # State for this page
        self.ping_ms: Optional[int] = None
        self.response: Optional[str] = None

        self._ping_loop = PingLoop(self.ping_backend, interval=ping_interval)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def mount(self) -> None:
        """Start pinging and load all people if the backend is up."""
        backend_up = self.ping_backend()
        self._ping_loop.start()
        if backend_up:
            self.handle_read_all()

    def unmount(self) -> None:
        """Stop the ping loop."""
        self._ping_loop.stop()

    @property
    def mounted(self) -> bool:
        return self._ping_loop.running

    def __enter__(self) -> "HomeView":
        self.mount()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.unmount()

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------
    def ping_backend(self) -> bool:
        """Ping the backend and record the round trip in ``ping_ms``.

        Returns ``True`` if the backend is up.
        """
        started = time.monotonic()
        result = self.ping_api.ping()
        if not result.success:
            self.ping_ms = None
            return False
        self.ping_ms = int((time.monotonic() - started) * 1000)
        return True

    def handle_create(self) -> None:
        result = self.api.create_person({"firstName": self.first_name, "lastName": self.last_name})
        self.response = result.message
        if not result.success:
            return

        person = result.data
        self.id = person["id"]
        self.first_name = ""
        self.last_name = ""
        self.people = self.people + [person]

    def handle_read(self) -> None:
        result = self.api.read_person(self.id)
        if not result.success:
            self.response = result.message
            return

        person = result.data
        self.first_name = person["firstName"]
        self.last_name = person["lastName"]
        self.response = json.dumps(person, indent=2)

    def handle_update(self) -> None:
        result = self.api.update_person(
            {"firstName": self.first_name, "lastName": self.last_name},
            self.id,
        )
        self.response = result.message
        if not result.success:
            return

        person = result.data
        self.first_name = ""
        self.last_name = ""
        self.people = [person if p["id"] == person["id"] else p for p in self.people]

    def handle_delete(self) -> None:
        result = self.api.delete_person(self.id)
        self.response = result.message
        if not result.success:
            return

        deleted_id = int(self.id)
        self.people = [p for p in self.people if p["id"] != deleted_id]

    def handle_read_all(self) -> None:
        result = self.api.read_people()
        self.response = result.message
        if result.success:
            self.people = result.data

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    @property
    def can_create(self) -> bool:
        return self.first_name != "" and self.last_name != ""

    @property
    def has_id(self) -> bool:
        return self.id != ""

    def render(self) -> str:
        lines = ["React Rest Template", "You are viewing the frontend of the template."]
        if self.ping_ms is not None:
            lines.append(
                f"Your backend is running on {self.api.base_url} with a ping of {self.ping_ms}ms."
            )
        else:
            lines.append("Your backend is unresponsive.")
        if self.response:
            lines += ["", self.response]
        lines += ["", f"First name: {self.first_name}", f"Last name: {self.last_name}", f"ID: {self.id}", ""]
        if self.people:
            lines += [f"{p['id']} - {p['firstName']} {p['lastName']}" for p in self.people]
        else:
            lines.append("No people yet")
        return "\n".join(lines)


HELP = """Commands:
  first <name>     set the first name field
  last <name>      set the last name field
  id <id>          set the id field
  create           create a person from the name fields
  read             read the person with the current id
  update           update the person with the current id
  delete           delete the person with the current id
  list             read all people
  show             redraw the page
  help             show this help
  quit             leave"""


def run_shell(view: HomeView, read_line: Callable[[str], str] = input, write: Callable[[str], Any] = print) -> None:
    """Drive ``view`` from commands typed at a prompt until ``quit`` or EOF."""
    setters = {"first": "first_name", "last": "last_name", "id": "id"}
    actions: Dict[str, Callable[[], None]] = {
        "create": view.handle_create,
        "read": view.handle_read,
        "update": view.handle_update,
        "delete": view.handle_delete,
        "list": view.handle_read_all,
    }
    write(view.render())
    while True:
        try:
            line = read_line("> ")
        except EOFError:
            break
        try:
            parts = shlex.split(line)
        except ValueError as exc:
            write(f"Could not parse command: {exc}")
            continue
        if not parts:
            continue
        command, args = parts[0].lower(), parts[1:]
        if command in {"quit", "exit"}:
            break
        if command == "help":
            write(HELP)
            continue
        if command in setters:
            setattr(view, setters[command], " ".join(args))
        elif command in actions:
            if command in {"read", "update", "delete"} and not view.has_id:
                write("Set an id first.")
                continue
            if command == "create" and not view.can_create:
                write("Set a first and last name first.")
                continue
            actions[command]()
        elif command != "show":
            write(f"Unknown command {command!r}; type 'help' for a list.")
            continue
        write(view.render())


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Console frontend for the person CRUD API")
    parser.add_argument("--base-url", default=API_URL, help="API base URL including /api")
    parser.add_argument("--ping-interval", type=float, default=1.0, help="Seconds between pings")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s [%(levelname)s] %(message)s")
    with HomeView(PersonAPI(base_url=args.base_url), ping_interval=args.ping_interval) as view:
        run_shell(view)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
