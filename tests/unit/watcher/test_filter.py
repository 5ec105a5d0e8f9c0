import pytest

from livepreview.config import WatchConfig
from livepreview.watcher.filter import PathFilter


@pytest.fixture
def note(tmpdir):
    f = tmpdir.join('note.md')
    f.write('# note')
    return f.strpath


def test_first_change_is_retained(path_filter_factory, note):
    path_filter = path_filter_factory()
    assert path_filter.should_retain(note)
    assert note in path_filter


def test_non_matching_extension_is_never_retained(tmpdir, clock,
                                                  path_filter_factory):
    text = tmpdir.join('note.txt')
    text.write('text')
    path_filter = path_filter_factory()
    assert not path_filter.should_retain(text.strpath)
    clock.advance(10)
    assert not path_filter.should_retain(text.strpath)
    assert len(path_filter) == 0


def test_path_without_extension_is_not_retained(tmpdir, path_filter_factory):
    f = tmpdir.join('Makefile')
    f.write('all:')
    assert not path_filter_factory().should_retain(f.strpath)


def test_missing_file_is_not_retained(tmpdir, path_filter_factory):
    missing = tmpdir.join('missing.md').strpath
    path_filter = path_filter_factory()
    assert not path_filter.should_retain(missing)
    assert missing not in path_filter


def test_directory_is_not_retained(tmpdir, path_filter_factory):
    directory = tmpdir.mkdir('chapter.md').strpath
    assert not path_filter_factory().should_retain(directory)


def test_change_within_throttle_is_dropped(clock, path_filter_factory, note):
    path_filter = path_filter_factory(debounce_throttle=0.3)
    assert path_filter.should_retain(note)
    clock.advance(0.1)
    assert not path_filter.should_retain(note)
    clock.advance(0.1)
    assert not path_filter.should_retain(note)


def test_dropped_change_does_not_extend_window(clock, path_filter_factory,
                                               note):
    path_filter = path_filter_factory(debounce_throttle=0.3)
    assert path_filter.should_retain(note)
    clock.advance(0.2)
    assert not path_filter.should_retain(note)
    clock.advance(0.2)
    assert path_filter.should_retain(note)


def test_change_after_throttle_is_retained(clock, path_filter_factory, note):
    path_filter = path_filter_factory(debounce_throttle=0.3)
    assert path_filter.should_retain(note)
    clock.advance(0.5)
    assert path_filter.should_retain(note)
    clock.advance(0.1)
    assert not path_filter.should_retain(note)


def test_paths_are_debounced_independently(tmpdir, clock,
                                           path_filter_factory):
    first = tmpdir.join('a.md')
    second = tmpdir.join('b.md')
    first.write('a')
    second.write('b')
    path_filter = path_filter_factory()
    assert path_filter.should_retain(first.strpath)
    assert path_filter.should_retain(second.strpath)
    clock.advance(0.1)
    assert not path_filter.should_retain(first.strpath)


def test_cleanup_removes_only_expired_entries(tmpdir, clock,
                                              path_filter_factory):
    old = tmpdir.join('old.md')
    new = tmpdir.join('new.md')
    old.write('old')
    new.write('new')
    path_filter = path_filter_factory(debounce_throttle=0.3)
    assert path_filter.should_retain(old.strpath)
    clock.advance(0.2)
    assert path_filter.should_retain(new.strpath)
    clock.advance(0.2)

    assert path_filter.cleanup() == 1
    assert old.strpath not in path_filter
    assert new.strpath in path_filter


def test_cleanup_keeps_entry_exactly_at_throttle(clock, path_filter_factory,
                                                 note):
    path_filter = path_filter_factory(debounce_throttle=0.5)
    path_filter.should_retain(note)
    clock.advance(0.5)
    assert path_filter.cleanup() == 0
    assert note in path_filter


def test_cleanup_on_empty_filter(path_filter_factory):
    assert path_filter_factory().cleanup() == 0


def test_wildcard_extension_patterns(tmpdir, path_filter_factory):
    f = tmpdir.join('readme.markdown')
    f.write('readme')
    path_filter = path_filter_factory(extensions=['mark*'])
    assert path_filter.should_retain(f.strpath)


def test_can_build_from_config(note):
    config = WatchConfig(file_extensions=['md'], debounce_throttle=2.0)
    path_filter = PathFilter.from_config(config)
    assert path_filter.debounce_throttle == 2.0
    assert path_filter.should_retain(note)
    assert not path_filter.should_retain(note)
