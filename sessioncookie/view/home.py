"""
Home Page
"""
from html import escape
from string import Template
from typing import Any, Optional

from sessioncookie.defaults import NO_SAVED_TEXT, SOURCE_URL

HOME_TEMPLATE = Template("""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Session cookies in Sanic</title>
</head>
<body>
<main>
  <h1>Session cookies in Sanic</h1>
  <br />
  <h3>A simple example of setting, getting, and destroying signed session cookies.</h3>
  <hr />
  <div>
    <div>Enter some text to save in your session cookie:</div>
    <input type="text" id="newcookietext">
    <button id="save-cookie">save cookie data</button>
    <br />
    Text saved in cookie: <span id="saved-text">$saved_text</span>
  </div>
  <hr />
  <div>
    <button id="destroy-cookie">Destroy Session Cookie</button>
  </div>
  <hr />
  <div>
    <h3>Session cookie data in json format:</h3>
    <pre id="cookie-json">$cookie_json</pre>
  </div>
  <hr />
  <div>
    <a href="$source_url" target="_blank">View the source code on GitHub here!</a>
  </div>
</main>
<script>
  function post(url, body) {
    var options = {method: 'POST', credentials: 'same-origin'};
    if (body !== undefined) {
      options.headers = {'Content-Type': 'application/json'};
      options.body = JSON.stringify(body);
    }
    return fetch(url, options);
  }

  // Runs once per page load
  post('/_action/setup');

  document.getElementById('save-cookie').addEventListener('click', function () {
    var newText = document.getElementById('newcookietext').value;
    post('/_action/update-text', {newText: newText}).then(function () { window.location.reload(); });
  });

  document.getElementById('destroy-cookie').addEventListener('click', function () {
    post('/_action/destroy').then(function () { window.location.reload(); });
  });
</script>
</body>
</html>
""")


def render_home(saved_text: Optional[Any], cookie_json: str) -> str:
    """Render the demo page with escaped session values"""
    return HOME_TEMPLATE.substitute(
        saved_text=NO_SAVED_TEXT if saved_text in (None, '') else escape(str(saved_text)),
        cookie_json=escape(cookie_json),
        source_url=escape(SOURCE_URL),
    )
