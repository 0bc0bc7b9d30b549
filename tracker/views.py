import logging

from django.shortcuts import render, redirect
from django.contrib.auth import login, authenticate, logout, get_user_model
from django.contrib import messages
from django.db import IntegrityError
from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_POST

from . import repository
from .auth_forms import SignInForm, SignUpForm
from .exceptions import RepositoryError
from .forms import WinsEntryForm
from .services import save_todays_wins
from .session import SessionContext, session_required
from .stats import WinStats, compute_stats, milestone_message, record_message
from .streaks import StreakState

logger = logging.getLogger(__name__)

User = get_user_model()


def _first_error(form):
    """First error message on a form, for showing as a toast"""
    for errors in form.errors.values():
        if errors:
            return errors[0]
    return "Please check the form and try again."


def _load(loader, default, *args):
    """
    Read something for a dashboard widget. If the store is having a bad
    day the widget just shows its empty state.
    """
    try:
        result = loader(*args)
    except RepositoryError as exc:
        logger.warning("Widget read failed, showing defaults instead: %s", exc.reason)
        return default
    return default if result is None else result


# ================================
# DASHBOARD
# ================================

@session_required
def dashboard(request, session):
    """
    Main page: today's form, streak, stats and recent wins.
    POST saves today's wins and redirects back so every widget reloads.
    """
    today = timezone.localdate()
    todays_entry = _load(repository.get_entry, None, session.user_id, today)

    if request.method == 'POST':
        form = WinsEntryForm(request.POST, instance=todays_entry)
        if form.is_valid():
            try:
                result = save_todays_wins(session, form.cleaned_data, today=today)
            except RepositoryError:
                messages.error(request, "Failed to save wins. Please try again.")
            else:
                headline = "Today's wins saved! 🎉" if result.created else "Wins updated! 🎉"
                messages.success(request, f"{headline} Keep the momentum going!")
                return redirect('dashboard')
        else:
            messages.error(request, _first_error(form))
    else:
        form = WinsEntryForm(instance=todays_entry)

    streak = _load(repository.get_streak, StreakState(), session.user_id)

    context = {
        'session': session,
        'form': form,
        'today': today,
        'existing_entry': todays_entry is not None,
        'streak': streak,
        'milestone': milestone_message(streak.current_streak),
        'record_message': record_message(streak),
        'stats': _load(compute_stats, WinStats(), session.user_id),
        'recent_wins': _load(repository.list_recent_entries, [], session.user_id),
    }
    return render(request, 'tracker/dashboard.html', context)


# ================================
# AUTHENTICATION
# ================================

def auth_view(request):
    """
    Sign in and sign up on one page, switched with ?mode=signup.
    Already signed in? Straight to the dashboard.
    """
    if SessionContext.from_request(request) is not None:
        return redirect('dashboard')

    mode = request.POST.get('mode') or request.GET.get('mode') or 'signin'
    is_login = mode != 'signup'
    form_class = SignInForm if is_login else SignUpForm

    if request.method == 'POST':
        form = form_class(request.POST)
        if not form.is_valid():
            messages.error(request, _first_error(form))
        elif is_login:
            if _sign_in(request, form):
                return redirect('dashboard')
        elif _sign_up(request, form):
            return redirect('dashboard')
    else:
        form = form_class()

    return render(request, 'tracker/auth.html', {'form': form, 'is_login': is_login})


def _sign_in(request, form):
    email = form.cleaned_data['email']
    user = authenticate(request, username=email, password=form.cleaned_data['password'])
    if user is None:
        messages.error(request, "Invalid email or password")
        return False

    login(request, user)
    messages.success(request, "Welcome back!")
    return True


def _sign_up(request, form):
    email = form.cleaned_data['email']
    if User.objects.filter(username__iexact=email).exists():
        messages.error(request, "This email is already registered. Please sign in instead.")
        return False

    try:
        user = User.objects.create_user(
            username=email,
            email=email,
            password=form.cleaned_data['password'],
            first_name=form.cleaned_data.get('full_name', ''),
        )
    except IntegrityError:
        # Someone registered the same email between the check and the insert
        messages.error(request, "This email is already registered. Please sign in instead.")
        return False

    login(request, user, backend='django.contrib.auth.backends.ModelBackend')
    messages.success(request, "Account created! Welcome to Daily Wins! 🎉")
    return True


@require_POST
def sign_out_view(request):
    if SessionContext.from_request(request) is not None:
        logout(request)
        messages.success(request, "Signed out successfully")
    return redirect('auth')


# ================================
# AJAX ENDPOINTS FOR DASHBOARD WIDGETS
# ================================

def _entry_json(entry):
    return {
        'id': entry.id,
        'date': entry.date.isoformat(),
        'work_win': entry.work_win or None,
        'personal_win': entry.personal_win or None,
        'growth_win': entry.growth_win or None,
    }


@session_required
def streak_json(request, session):
    streak = _load(repository.get_streak, StreakState(), session.user_id)
    return JsonResponse({
        'current_streak': streak.current_streak,
        'longest_streak': streak.longest_streak,
        'last_entry_date': streak.last_entry_date.isoformat() if streak.last_entry_date else None,
        'milestone': milestone_message(streak.current_streak),
        'record_message': record_message(streak),
    })


@session_required
def stats_json(request, session):
    stats = _load(compute_stats, WinStats(), session.user_id)
    return JsonResponse(stats.as_dict())


@session_required
def recent_json(request, session):
    entries = _load(repository.list_recent_entries, [], session.user_id)
    return JsonResponse({'wins': [_entry_json(entry) for entry in entries]})


@session_required
def today_json(request, session):
    entry = _load(repository.get_entry, None, session.user_id, timezone.localdate())
    return JsonResponse({'entry': _entry_json(entry) if entry else None})
