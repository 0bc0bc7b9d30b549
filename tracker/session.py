"""
Who is signed in, passed around explicitly.

Views decorated with @session_required get a SessionContext as a keyword
argument instead of reaching into request.user themselves. Anything that
wants to react to people signing in or out can subscribe() to
auth_state_changed.
"""
import logging
from collections import namedtuple
from functools import wraps

from django.contrib.auth.signals import user_logged_in, user_logged_out
from django.dispatch import Signal, receiver
from django.shortcuts import redirect

logger = logging.getLogger(__name__)

SIGNED_IN = 'SIGNED_IN'
SIGNED_OUT = 'SIGNED_OUT'

# Sent with event=SIGNED_IN/SIGNED_OUT and session=SessionContext
auth_state_changed = Signal()


class SessionContext(namedtuple('SessionContext', ['user_id', 'email'])):
    """Read-only view of the signed-in user"""
    __slots__ = ()

    @classmethod
    def from_user(cls, user):
        if user is None or not user.is_authenticated:
            return None
        return cls(user_id=user.pk, email=user.email)

    @classmethod
    def from_request(cls, request):
        return cls.from_user(getattr(request, 'user', None))

    @property
    def initial(self):
        return self.email[:1].upper() if self.email else ''


def session_required(view_func):
    """
    Like login_required, but hands the view its session explicitly:
    view(request, *args, session=SessionContext, **kwargs).
    No session = off to the sign in page.
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        session = SessionContext.from_request(request)
        if session is None:
            return redirect('auth')
        return view_func(request, *args, session=session, **kwargs)
    return wrapper


def subscribe(callback):
    """
    Call `callback(event=..., session=...)` on every sign in / sign out.
    Returns a function that unsubscribes again.
    """
    def handler(sender, event, session, **kwargs):
        callback(event=event, session=session)

    auth_state_changed.connect(handler, weak=False)

    def unsubscribe():
        auth_state_changed.disconnect(handler)

    return unsubscribe


@receiver(user_logged_in)
def announce_sign_in(sender, request, user, **kwargs):
    session = SessionContext.from_user(user)
    logger.info("User %s signed in", session.user_id)
    auth_state_changed.send(sender=SessionContext, event=SIGNED_IN, session=session)


@receiver(user_logged_out)
def announce_sign_out(sender, request, user, **kwargs):
    # user can be None if the session had already expired
    session = SessionContext.from_user(user)
    if session is None:
        return
    logger.info("User %s signed out", session.user_id)
    auth_state_changed.send(sender=SessionContext, event=SIGNED_OUT, session=session)
