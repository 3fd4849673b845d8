import json

import pytest

from sessioncookie.defaults import SECRET_DATA_TEXT, NO_SAVED_TEXT


async def post_action(app, path, cookie=None, **kwargs):
    headers = {'Cookie': cookie} if cookie else {}
    _, response = await app.asgi_client.post(path, headers=headers, **kwargs)
    return response


async def fetch_data(app, cookie=None):
    headers = {'Cookie': cookie} if cookie else {}
    _, response = await app.asgi_client.get('/_data/session', headers=headers)
    assert response.status == 200
    return response.json


@pytest.mark.asyncio
async def test_data_without_cookie(app):
    data = await fetch_data(app)
    assert data == {'savedText': None, 'allCookieDataJson': '{}'}


@pytest.mark.asyncio
async def test_setup_counts_page_loads(app, cookie_pair):
    response = await post_action(app, '/_action/setup')
    assert response.status == 200
    set_cookie = response.headers['set-cookie']
    assert response.json == {'newCookie': set_cookie}

    session = json.loads((await fetch_data(app, cookie_pair(set_cookie)))['allCookieDataJson'])
    assert session == {'secretData': SECRET_DATA_TEXT, 'pageLoads': 1}

    response = await post_action(app, '/_action/setup', cookie_pair(set_cookie))
    session = json.loads((await fetch_data(app, cookie_pair(response.headers['set-cookie'])))['allCookieDataJson'])
    assert session['pageLoads'] == 2


@pytest.mark.asyncio
async def test_update_text_then_fetch(app, cookie_pair):
    response = await post_action(app, '/_action/update-text', json={'newText': 'hello'})
    assert response.status == 200

    data = await fetch_data(app, cookie_pair(response.headers['set-cookie']))
    assert data['savedText'] == 'hello'


@pytest.mark.asyncio
async def test_update_text_accepts_form_body(app, cookie_pair):
    response = await post_action(app, '/_action/update-text', data={'newText': 'from form'})
    assert response.status == 200
    data = await fetch_data(app, cookie_pair(response.headers['set-cookie']))
    assert data['savedText'] == 'from form'


@pytest.mark.asyncio
async def test_secret_data_survives_update_text(app, cookie_pair):
    setup = await post_action(app, '/_action/setup')
    update = await post_action(app, '/_action/update-text', cookie_pair(setup.headers['set-cookie']),
                               json={'newText': 'hello'})

    session = json.loads((await fetch_data(app, cookie_pair(update.headers['set-cookie'])))['allCookieDataJson'])
    assert session == {'secretData': SECRET_DATA_TEXT, 'pageLoads': 1, 'savedText': 'hello'}


@pytest.mark.asyncio
async def test_destroy_clears_everything(app, cookie_pair):
    setup = await post_action(app, '/_action/setup')
    response = await post_action(app, '/_action/destroy', cookie_pair(setup.headers['set-cookie']))

    destroyed = response.headers['set-cookie']
    assert response.json == {'destroyedCookie': destroyed}
    assert 'Max-Age=0' in destroyed

    data = await fetch_data(app, cookie_pair(destroyed))
    assert data == {'savedText': None, 'allCookieDataJson': '{}'}


@pytest.mark.asyncio
async def test_invalid_cookie_does_not_break_the_page(app):
    data = await fetch_data(app, 'sessioncookie_session=not-a-valid-token')
    assert data['allCookieDataJson'] == '{}'

    response = await post_action(app, '/_action/setup', 'sessioncookie_session=forged.value.sig')
    assert response.status == 200


@pytest.mark.asyncio
async def test_non_integer_page_loads_restarts_count(app, store, cookie_pair):
    from sessioncookie.session import Session
    header = await store.commit_session(Session({'pageLoads': 'many'}))

    response = await post_action(app, '/_action/setup', cookie_pair(header))
    session = json.loads((await fetch_data(app, cookie_pair(response.headers['set-cookie'])))['allCookieDataJson'])
    assert session['pageLoads'] == 1


@pytest.mark.asyncio
@pytest.mark.parametrize('body', [{}, {'newText': 5}, {'other': 'x'}])
async def test_update_text_requires_string(app, body):
    response = await post_action(app, '/_action/update-text', json=body)
    assert response.status == 400
    assert response.json['success'] is False
    assert response.json['code'] == 'BAD_REQUEST'
    assert 'set-cookie' not in response.headers


@pytest.mark.asyncio
async def test_home_page_renders_session(app, cookie_pair):
    _, response = await app.asgi_client.get('/')
    assert response.status == 200
    assert NO_SAVED_TEXT in response.text

    update = await post_action(app, '/_action/update-text', json={'newText': '<b>hi</b>'})
    _, response = await app.asgi_client.get('/', headers={'Cookie': cookie_pair(update.headers['set-cookie'])})
    assert '&lt;b&gt;hi&lt;/b&gt;' in response.text
    assert '<b>hi</b>' not in response.text


@pytest.mark.asyncio
@pytest.mark.parametrize('saved, shown', [(42, '42'), (['a', 'b'], '[&#x27;a&#x27;, &#x27;b&#x27;]')])
async def test_home_page_renders_non_string_saved_text(app, store, cookie_pair, saved, shown):
    from sessioncookie.session import Session
    header = await store.commit_session(Session({'savedText': saved}))

    _, response = await app.asgi_client.get('/', headers={'Cookie': cookie_pair(header)})
    assert response.status == 200
    assert f'<span id="saved-text">{shown}</span>' in response.text


@pytest.mark.asyncio
async def test_health_and_unknown_route(app):
    _, response = await app.asgi_client.get('/health')
    assert response.json == {'status': 'ok'}

    _, response = await app.asgi_client.get('/does-not-exist')
    assert response.status == 404
    assert response.json['success'] is False
