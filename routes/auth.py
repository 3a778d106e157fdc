"""
auth.py — Landing, sign-in, sign-up, sign-out
"""

import logging
from html import escape

from flask import Blueprint, flash, g, redirect, request, url_for

from pages import SignInForm, SignUpForm
from pages.auth_forms import SIGNUP_SUCCESS
from routes.common import forget_views, render_page
from ui import field_error

logger = logging.getLogger(__name__)

bp = Blueprint("auth", __name__)


VISUALIZERS = [
    ("🔗", "Linked List", "Singly and doubly linked lists: insert, delete, search with a node-by-node walk."),
    ("📚", "Stack", "Static or dynamic LIFO stack: push, pop, peek."),
    ("🚶", "Queue", "Static or dynamic FIFO queue: enqueue, dequeue, front and rear."),
    ("📶", "Sorting", "Bubble, insertion, selection, min and optimized bubble sort, step by step."),
    ("🔍", "Searching", "Linear and binary search with the live search window."),
]


@bp.route("/")
def landing():
    cards = "".join(
        f'<div class="panel"><h3>{icon} {name}</h3><p class="explanation-text">{text}</p></div>'
        for icon, name, text in VISUALIZERS
    )
    action = ('<a href="/dashboard"><button class="btn-primary">Go to dashboard</button></a>'
              if g.auth.is_authenticated else
              '<a href="/signup"><button class="btn-primary">Get started</button></a> '
              '<a href="/signin"><button class="btn-secondary">Sign in</button></a>')
    content = f"""
    <div class="hero">
      <h1>⚡ AlgoPulse</h1>
      <p class="explanation-text">Watch data structures and algorithms run, one step at a time.</p>
      <div class="button-row" style="justify-content:center">{action}</div>
    </div>
    <div class="cards">{cards}</div>
    """
    return render_page("Welcome", content=content)


@bp.route("/signin", methods=["GET", "POST"])
def signin():
    if g.auth.is_authenticated:
        return redirect(url_for("dashboard.index"))

    form = SignInForm()
    error = None
    if request.method == "POST":
        form = SignInForm.from_form(request.form)
        if form.validate():
            ok, message = g.auth.login(form.username, form.password)
            if ok:
                return redirect(url_for("dashboard.index"))
            error = message

    content = f"""
    <div class="panel auth-box">
      <h3>🔐 Sign in</h3>
      {f'<div class="banner error">⚠️ {_esc(error)}</div>' if error else ''}
      <form method="post" action="/signin">
        <label for="username">Username</label>
        <input type="text" id="username" name="username" value="{_esc(form.username)}">
        {field_error(form.errors, "username")}
        <label for="password">Password</label>
        <input type="password" id="password" name="password">
        {field_error(form.errors, "password")}
        <div class="button-row"><button type="submit" class="btn-primary">Sign in</button></div>
      </form>
      <p class="hint">No account? <a href="/signup">Sign up</a></p>
    </div>
    """
    return render_page("Sign in", content=content)


@bp.route("/signup", methods=["GET", "POST"])
def signup():
    if g.auth.is_authenticated:
        return redirect(url_for("dashboard.index"))

    form = SignUpForm()
    error = None
    if request.method == "POST":
        form = SignUpForm.from_form(request.form)
        if form.validate():
            ok, message = g.auth.signup(form.username, form.password, form.email)
            if ok:
                flash(SIGNUP_SUCCESS, "success")
                return redirect(url_for("auth.signin"))
            error = message

    content = f"""
    <div class="panel auth-box">
      <h3>📝 Create account</h3>
      {f'<div class="banner error">⚠️ {_esc(error)}</div>' if error else ''}
      <form method="post" action="/signup">
        <label for="username">Username</label>
        <input type="text" id="username" name="username" value="{_esc(form.username)}">
        {field_error(form.errors, "username")}
        <label for="email">Email</label>
        <input type="email" id="email" name="email" value="{_esc(form.email)}">
        {field_error(form.errors, "email")}
        <label for="password">Password</label>
        <input type="password" id="password" name="password">
        {field_error(form.errors, "password")}
        <label for="confirm_password">Confirm password</label>
        <input type="password" id="confirm_password" name="confirm_password">
        {field_error(form.errors, "confirm_password")}
        <div class="button-row"><button type="submit" class="btn-primary">Sign up</button></div>
      </form>
      <p class="hint">Already registered? <a href="/signin">Sign in</a></p>
    </div>
    """
    return render_page("Sign up", content=content)


@bp.route("/logout")
def logout():
    forget_views()
    g.auth.logout()
    return redirect(url_for("auth.landing"))


def _esc(value) -> str:
    return escape(value or "")
