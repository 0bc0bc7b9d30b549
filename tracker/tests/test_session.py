from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.test import RequestFactory, TestCase

from tracker.session import SIGNED_IN, SIGNED_OUT, SessionContext, session_required, subscribe

User = get_user_model()


class SessionContextTests(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='ivy@example.com', email='ivy@example.com', password='secret1')
        self.factory = RequestFactory()

    def test_from_request(self):
        request = self.factory.get('/')
        request.user = self.user
        session = SessionContext.from_request(request)
        self.assertEqual(session, SessionContext(user_id=self.user.pk, email='ivy@example.com'))
        self.assertEqual(session.initial, 'I')

    def test_anonymous_has_no_session(self):
        request = self.factory.get('/')
        request.user = AnonymousUser()
        self.assertIsNone(SessionContext.from_request(request))

    def test_session_required_passes_session_explicitly(self):
        seen = []

        @session_required
        def view(request, session):
            seen.append(session)
            return 'ok'

        request = self.factory.get('/')
        request.user = self.user
        self.assertEqual(view(request), 'ok')
        self.assertEqual(seen[0].user_id, self.user.pk)

        request.user = AnonymousUser()
        response = view(request)
        self.assertEqual(response.status_code, 302)
        self.assertEqual(len(seen), 1)


class AuthStateSubscriptionTests(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='jo@example.com', email='jo@example.com', password='secret1')
        self.events = []
        self.unsubscribe = subscribe(lambda event, session: self.events.append((event, session.email)))
        self.addCleanup(self.unsubscribe)

    def test_sign_in_and_out_are_announced(self):
        self.client.login(username='jo@example.com', password='secret1')
        self.client.logout()
        self.assertEqual(self.events, [(SIGNED_IN, 'jo@example.com'), (SIGNED_OUT, 'jo@example.com')])

    def test_unsubscribe_stops_notifications(self):
        self.unsubscribe()
        self.client.login(username='jo@example.com', password='secret1')
        self.assertEqual(self.events, [])
