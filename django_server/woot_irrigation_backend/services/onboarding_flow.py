"""
Screen flow of the client: create account -> add plants -> dashboard, with login/logout and a settings overlay.

Each state is an immutable value; the payload of a transition (the saved user) travels with the new state instead of
living in shared globals. The API reports the resulting screen as `nextScreen`.
"""
from dataclasses import dataclass, replace
from typing import Any, Optional

from woot_irrigation_backend.utils import ListableEnum


class Screen(ListableEnum):
    CreateAccount = 'create-account'
    AddPlants = 'add-plants'
    Login = 'login'
    Dashboard = 'dashboard'


class OnboardingEvent(ListableEnum):
    AccountCreated = 'account-created'
    SwitchToLogin = 'switch-to-login'
    PlantsAdded = 'plants-added'
    Back = 'back'
    LoggedIn = 'logged-in'
    SwitchToCreate = 'switch-to-create'
    OpenSettings = 'open-settings'
    CloseSettings = 'close-settings'
    SettingsSaved = 'settings-saved'
    LoggedOut = 'logged-out'


class InvalidTransition(ValueError):
    pass


@dataclass(frozen=True)
class OnboardingState:
    screen: Screen = Screen.CreateAccount
    user: Optional[Any] = None
    settings_open: bool = False


# (screen, settings overlay open, event) -> target screen
TRANSITIONS = {
    (Screen.CreateAccount, False, OnboardingEvent.AccountCreated): Screen.AddPlants,
    (Screen.CreateAccount, False, OnboardingEvent.SwitchToLogin): Screen.Login,
    (Screen.AddPlants, False, OnboardingEvent.PlantsAdded): Screen.Dashboard,
    (Screen.AddPlants, False, OnboardingEvent.Back): Screen.CreateAccount,
    (Screen.Login, False, OnboardingEvent.LoggedIn): Screen.Dashboard,
    (Screen.Login, False, OnboardingEvent.SwitchToCreate): Screen.CreateAccount,
    (Screen.Dashboard, False, OnboardingEvent.OpenSettings): Screen.Dashboard,
    (Screen.Dashboard, False, OnboardingEvent.PlantsAdded): Screen.Dashboard,
    (Screen.Dashboard, False, OnboardingEvent.LoggedOut): Screen.Login,
    (Screen.Dashboard, True, OnboardingEvent.CloseSettings): Screen.Dashboard,
    (Screen.Dashboard, True, OnboardingEvent.SettingsSaved): Screen.Dashboard,
}

PAYLOAD_EVENTS = {
    OnboardingEvent.AccountCreated,
    OnboardingEvent.PlantsAdded,
    OnboardingEvent.LoggedIn,
    OnboardingEvent.SettingsSaved,
}


def transition(state: OnboardingState, event: OnboardingEvent, payload=None) -> OnboardingState:
    """
    :param state: current state
    :param event: what happened on the current screen
    :param payload: the saved user, required for events that produce one
    :return: the next state
    :raises InvalidTransition: the event is not possible on the current screen
    """
    target = TRANSITIONS.get((state.screen, state.settings_open, event))
    if target is None:
        overlay = ' (settings open)' if state.settings_open else ''
        raise InvalidTransition(f"'{event.value}' is not possible on screen '{state.screen.value}'{overlay}.")

    if event in PAYLOAD_EVENTS and payload is None:
        raise InvalidTransition(f"'{event.value}' requires the saved user.")

    if event == OnboardingEvent.LoggedOut:
        return OnboardingState(screen=target)
    if event == OnboardingEvent.OpenSettings:
        return replace(state, settings_open=True)
    if event in (OnboardingEvent.CloseSettings, OnboardingEvent.SettingsSaved):
        return replace(state, settings_open=False, user=payload if payload is not None else state.user)

    return OnboardingState(screen=target, user=payload if payload is not None else state.user)


def next_screen(screen: Screen, event: OnboardingEvent, settings_open: bool = False) -> Screen:
    """Target screen of an event without carrying a payload, as reported by the API."""
    target = TRANSITIONS.get((screen, settings_open, event))
    if target is None:
        raise InvalidTransition(f"'{event.value}' is not possible on screen '{screen.value}'.")
    return target
