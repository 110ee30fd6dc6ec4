"""
CategoryDesk Client - Application Shell

Composes the session manager, the category synchronizer and the two
form controllers into a navigable application with three routes:

    /        protected category view (requires a session credential)
    /login   login form
    /signup  signup form

The shell is headless; front ends (GUI, tests) subscribe to route
changes and render whatever route is current.

Author: CategoryDesk Project
"""

import logging
from typing import Callable, List, Optional

from .managers import SessionManager
from .operations import CategorySynchronizer, LoginFormController, SignupFormController

# Configure logging
logger = logging.getLogger(__name__)


class Route:
    """Route paths known to the shell."""
    CATEGORIES = "/"
    LOGIN = "/login"
    SIGNUP = "/signup"

    ALL = (CATEGORIES, LOGIN, SIGNUP)


def run_inline(work: Callable[[], object]):
    """Default dispatcher: run the work on the calling thread."""
    work()


class AppShell:
    """
    Navigable application state.

    Responsibilities:
    - Check the session gate whenever the category view is mounted
    - Load categories on every mount of the category view
    - Route to the category view after login, and to login after
      registration is acknowledged or on logout
    - Clear the session credential on logout
    """

    def __init__(self, api_client, session_manager: Optional[SessionManager] = None,
                 dispatch: Callable[[Callable[[], object]], None] = run_inline):
        """
        Args:
            api_client: CategoryDeskAPI instance shared by all components
            session_manager: Session credential owner (a fresh one if omitted)
            dispatch: Runs network-bound work; the GUI passes one that uses a
                      worker thread
        """
        self.api = api_client
        self.session = session_manager if session_manager is not None else SessionManager()
        self.dispatch = dispatch
        self.synchronizer = CategorySynchronizer(api_client)
        self.login_form = LoginFormController(
            api_client, self.session, on_authenticated=self.show_categories
        )
        self.signup_form = SignupFormController(
            api_client, on_acknowledged=self.show_login
        )
        self.route: Optional[str] = None
        self.redirect_origin: Optional[str] = None
        self._listeners: List[Callable[[str], None]] = []

    def add_route_listener(self, listener: Callable[[str], None]):
        """Register a callback receiving the new route after each navigation."""
        self._listeners.append(listener)

    def navigate(self, path: str) -> str:
        """
        Navigate to a route.

        The category view is only reachable with a session credential;
        without one the login route is shown instead and the requested
        path is kept in redirect_origin.

        Args:
            path: One of Route.ALL

        Returns:
            The route actually shown

        Raises:
            ValueError: If path is not a known route
        """
        if path not in Route.ALL:
            raise ValueError(f"Unknown route: {path}")

        mount_categories = False
        if path == Route.CATEGORIES:
            decision = self.session.require_session(path)
            if decision.allowed:
                mount_categories = True
            else:
                self.redirect_origin = decision.origin
                path = decision.redirect_to

        logger.debug(f"Navigating to {path}")
        self.route = path
        for listener in self._listeners:
            listener(path)

        if mount_categories:
            self.dispatch(self.synchronizer.load)
        return path

    def start(self) -> str:
        """Initial navigation, as when the application first opens."""
        return self.navigate(Route.CATEGORIES)

    def show_categories(self) -> str:
        return self.navigate(Route.CATEGORIES)

    def show_login(self) -> str:
        return self.navigate(Route.LOGIN)

    def show_signup(self) -> str:
        return self.navigate(Route.SIGNUP)

    def is_authenticated(self) -> bool:
        return self.session.is_authenticated()

    def logout(self) -> str:
        """
        End the session locally and return to the login page.

        No request is sent to the server.
        """
        logger.info("Logging out")
        self.session.clear_credential()
        self.synchronizer.reset()
        self.login_form.reset()
        return self.navigate(Route.LOGIN)
