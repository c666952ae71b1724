"""Minimal HTML pages for the login and welcome routes."""

from html import escape

INVALID_CREDENTIALS_MESSAGE = "Credenziali non valide, riprova."


def render_login_page(action: str, error: bool) -> str:
    parts = ["<!DOCTYPE html><html><body>"]
    if error:
        parts.append(f"<p style='color:red;'>{INVALID_CREDENTIALS_MESSAGE}</p>")
    parts.append(f"<form method='POST' action='{escape(action, quote=True)}'>")
    parts.append("Utente: <input name='username'/><br/>")
    parts.append("Password: <input type='password' name='password'/><br/>")
    parts.append("<button type='submit'>Login</button>")
    parts.append("</form></body></html>")
    return "\n".join(parts)


def render_welcome_page(username: str, logout_url: str) -> str:
    return "\n".join(
        [
            "<!DOCTYPE html><html><body>",
            f"<h1>Benvenuto, {escape(username)}!</h1>",
            f"<a href='{escape(logout_url, quote=True)}'>Logout</a>",
            "</body></html>",
        ]
    )
