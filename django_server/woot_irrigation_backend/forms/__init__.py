from .auth_forms import SignUpForm, LoginForm
