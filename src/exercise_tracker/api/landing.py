"""Static landing page served at the site root."""

LANDING_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Exercise Tracker</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      form { margin-bottom: 2rem; max-width: 360px; }
      input { display: block; padding: 0.4rem 0.6rem; margin: 0.3rem 0; width: 100%; }
      button { padding: 0.4rem 0.8rem; }
      code { background: #f6f6f6; padding: 0.1rem 0.3rem; }
    </style>
  </head>
  <body>
    <h1>Exercise Tracker</h1>
    <form action="/api/users" method="post">
      <h2>Create a new user</h2>
      <p><code>POST /api/users</code></p>
      <input name="username" type="text" placeholder="username" />
      <button type="submit">Submit</button>
    </form>
    <form id="exercise-form" method="post">
      <h2>Add exercises</h2>
      <p><code>POST /api/users/:_id/exercises</code></p>
      <input id="uid" type="text" placeholder=":_id" />
      <input name="description" type="text" placeholder="description*" />
      <input name="duration" type="text" placeholder="duration* (mins.)" />
      <input name="date" type="text" placeholder="date (yyyy-mm-dd)" />
      <button type="submit">Submit</button>
    </form>
    <p>
      <code>GET /api/users/:_id/logs?[from][&amp;to][&amp;limit]</code><br />
      <code>from</code>, <code>to</code> = dates (yyyy-mm-dd);
      <code>limit</code> = number
    </p>
    <script>
      const exerciseForm = document.getElementById('exercise-form');
      exerciseForm.addEventListener('submit', () => {
        const userId = document.getElementById('uid').value;
        exerciseForm.action = '/api/users/' + userId + '/exercises';
        exerciseForm.submit();
      });
    </script>
  </body>
</html>
"""
