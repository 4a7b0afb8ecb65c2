import pytest

from generes.args import parse_args, resolve
from generes.model import GenerationConfig, GuardStyle, ResourceEntry


def test_defaults():
    config, entries = resolve([])
    assert config == GenerationConfig('resources', 'resources', 'resources.hpp', GuardStyle.DEFINE)
    assert entries == []


def test_options_and_resources():
    config, entries = resolve([
        'a.bin:first', '--guards', 'pragma', '--name', 'blobs',
        '--namespace', 'assets', '-o', 'build/data', 'b.bin:second'])
    assert config.guards is GuardStyle.PRAGMA
    assert config.name == 'blobs'
    assert config.namespace == 'assets'
    assert config.output == 'build/data.hpp'
    assert entries == [ResourceEntry('a.bin', 'first'), ResourceEntry('b.bin', 'second')]


def test_split_on_first_colon():
    _, entries = resolve(['dir/file.bin:alias:with:colons'])
    assert entries == [ResourceEntry('dir/file.bin', 'alias:with:colons')]


def test_empty_values_fall_back_to_defaults():
    config, _ = resolve(['--name', '', '--namespace', '', '--output', ''])
    assert config == GenerationConfig()


def test_invalid_guards_is_usage_error(capsys):
    with pytest.raises(SystemExit) as info:
        resolve(['--guards', 'once'])
    assert info.value.code == 2
    assert 'invalid choice' in capsys.readouterr().err


@pytest.mark.parametrize('token', ['nocolon', ':alias', 'file:'])
def test_malformed_resource_is_usage_error(token):
    with pytest.raises(SystemExit) as info:
        resolve([token])
    assert info.value.code == 2


def test_arguments_from_file(tmp_path):
    argfile = tmp_path / 'args.txt'
    argfile.write_text('--namespace\nassets\nlogo.png:logo\n')
    config, entries = resolve(['@' + str(argfile)])
    assert config.namespace == 'assets'
    assert entries == [ResourceEntry('logo.png', 'logo')]


def test_duplicate_alias_warns(caplog):
    _, entries = resolve(['a.bin:x', 'b.bin:x'])
    assert len(entries) == 2
    assert 'Duplicate alias "x"' in caplog.text


def test_verbose_flag():
    assert parse_args(['-v']).verbose
    assert not parse_args([]).verbose


def test_manifest_defaults_and_precedence(tmp_path):
    manifest = tmp_path / 'res.yaml'
    manifest.write_text(
        'namespace: assets\n'
        'guards: pragma\n'
        'output: out/assets\n'
        'resources:\n'
        '  - logo.png:logo\n'
        '  - file: basic.frag\n'
        '    alias: basic_frag\n')
    config, entries = resolve(['-c', str(manifest), '--namespace', 'other', 'extra.bin:extra'])
    assert config.namespace == 'other'
    assert config.guards is GuardStyle.PRAGMA
    assert config.output == 'out/assets.hpp'
    assert entries == [
        ResourceEntry('logo.png', 'logo'),
        ResourceEntry('basic.frag', 'basic_frag'),
        ResourceEntry('extra.bin', 'extra'),
    ]


def test_manifest_invalid_guards(tmp_path):
    manifest = tmp_path / 'res.yaml'
    manifest.write_text('guards: sometimes\n')
    with pytest.raises(SystemExit) as info:
        resolve(['--config', str(manifest)])
    assert info.value.code == 2


def test_missing_manifest(tmp_path):
    with pytest.raises(SystemExit) as info:
        resolve(['--config', str(tmp_path / 'missing.yaml')])
    assert info.value.code == 2


def test_manifest_not_utf8(tmp_path):
    manifest = tmp_path / 'res.yaml'
    manifest.write_bytes(b'name: \xff\xfe\n')
    with pytest.raises(SystemExit) as info:
        resolve(['-c', str(manifest)])
    assert info.value.code == 2
