from sessioncookie.console import Artisan
from sessioncookie.console.commands import ServeCommand
from sessioncookie.support import EnvHelper


class TestGenerateSecretCommand:
    def test_prints_secret_without_writing(self, isolated_env, capsys):
        assert Artisan().run(['sessioncookie', 'secret:generate']) == 0
        output = capsys.readouterr().out.strip().splitlines()
        assert len(output[-1]) >= 40
        assert not isolated_env.exists()

    def test_write_prepends_new_secret(self, isolated_env, monkeypatch):
        monkeypatch.setenv('SESSION_SECRETS', 'older,oldest')

        assert Artisan().run(['sessioncookie', 'secret:generate', '--write']) == 0

        secrets = EnvHelper.get_list('SESSION_SECRETS')
        assert secrets[1:] == ['older', 'oldest']
        assert secrets[0] not in ('older', 'oldest')
        assert 'SESSION_SECRETS' in isolated_env.read_text()

    def test_keep_limits_rotation(self, isolated_env, monkeypatch):
        monkeypatch.setenv('SESSION_SECRETS', 'older,oldest')

        Artisan().run(['sessioncookie', 'secret:generate', '--write', '--keep=2'])

        assert EnvHelper.get_list('SESSION_SECRETS')[1:] == ['older']


class TestArtisan:
    def test_help_and_unknown_command(self, capsys):
        artisan = Artisan()
        assert artisan.run(['sessioncookie']) == 0
        assert 'secret:generate' in capsys.readouterr().out
        assert artisan.run(['sessioncookie', 'nope']) == 1

    def test_parse_args(self):
        args, kwargs = Artisan()._parse_args(['pos', '--port=9000', '--dev', '--host=localhost', '-v'])
        assert args == ['pos']
        assert kwargs == {'port': 9000, 'dev': True, 'host': 'localhost', 'v': True}

    def test_serve_reports_missing_secrets(self, capsys):
        assert Artisan().run(['sessioncookie', 'serve']) == 1
        assert 'secret' in capsys.readouterr().out.lower()

    def test_parse_args_space_separated_values(self):
        args, kwargs = Artisan()._parse_args(['--host', '127.0.0.1', '--port', '9000', '--dev'])
        assert args == []
        assert kwargs == {'host': '127.0.0.1', 'port': 9000, 'dev': True}

    def test_serve_accepts_space_separated_options(self, monkeypatch):
        captured = {}

        def fake_handle(self, **kwargs):
            captured.update(kwargs)
            return 0

        monkeypatch.setattr(ServeCommand, 'handle', fake_handle)

        assert Artisan().run(['sessioncookie', 'serve', '--host', '127.0.0.1', '--port', '9000']) == 0
        assert captured == {'host': '127.0.0.1', 'port': 9000}
