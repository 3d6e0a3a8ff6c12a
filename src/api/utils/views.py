"""HTML pages for the password reset link flow."""

from html import escape

_PAGE = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <title>{title}</title>
    <style>
        body {{ font-family: -apple-system, BlinkMacSystemFont, sans-serif;
                display: flex; justify-content: center; padding-top: 80px; }}
        .card {{ max-width: 400px; width: 100%; text-align: center; }}
        input {{ width: 100%; padding: 8px; margin: 8px 0; box-sizing: border-box; }}
        button {{ padding: 8px 24px; }}
    </style>
</head>
<body>
    <div class="card">
{body}
    </div>
</body>
</html>
"""


def _render(title: str, body: str) -> str:
    return _PAGE.format(title=escape(title), body=body)


def render_message_page(heading: str, action: str) -> str:
    """Heading plus a one-line call to action (expired / complete pages)"""
    body = f"        <h1>{escape(heading)}</h1>\n        <p>{escape(action)}</p>"
    return _render(heading, body)


def render_expired_page() -> str:
    return render_message_page("The request has expired.", "Please try again.")


def render_complete_page() -> str:
    return render_message_page("Your password has been changed.", "Please log in.")


def render_new_password_page(user_id: str, password_token: str) -> str:
    """Form posting password, userId and passwordToken to /new-password"""
    body = f"""        <h1>Set a new password</h1>
        <form action="/new-password" method="POST">
            <input type="password" name="password" placeholder="New password" required>
            <input type="hidden" name="userId" value="{escape(user_id)}">
            <input type="hidden" name="passwordToken" value="{escape(password_token)}">
            <button type="submit">Change password</button>
        </form>"""
    return _render("Set a new password", body)
