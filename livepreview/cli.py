"""Command line interface for the live-preview change watcher.

``livepreview watch`` runs a headless consumer loop and prints every
changed file, which is what the preview window does with the same events
before re-rendering.
"""
import logging
import sys
import traceback

import click

from typing import List, Optional  # noqa

from livepreview import __version__ as livepreview_version
from livepreview.config import ConfigError, WatchConfig, load_config
from livepreview.events import WatchError  # noqa
from livepreview.loop import EventHandler, EventLoop
from livepreview.watcher.factory import create_watcher
from livepreview.watcher.shared import WatcherError


class EchoEventHandler(EventHandler):
    def on_files_changed(self, paths):
        # type: (List[str]) -> None
        for path in paths:
            click.echo('changed: %s' % path)

    def on_watch_error(self, event):
        # type: (WatchError) -> None
        click.echo('error: %s' % event.message, err=True)


def _configure_logging(debug):
    # type: (bool) -> None
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s %(name)s [%(levelname)s] %(message)s')


def _build_config(config_file, no_watch, extensions, debounce):
    # type: (Optional[str], bool, List[str], Optional[int]) -> WatchConfig
    config = load_config(config_file)
    if not (no_watch or extensions or debounce is not None):
        return config
    throttle = config.debounce_throttle
    if debounce is not None:
        throttle = debounce / 1000.0
    return WatchConfig(
        file_extensions=(list(extensions) if extensions
                         else config.file_extensions.patterns),
        debounce_throttle=throttle,
        enabled=config.enabled and not no_watch,
    )


@click.group()
@click.version_option(version=livepreview_version,
                      message='%(prog)s %(version)s')
@click.option('--debug/--no-debug',
              default=False,
              help='Print debug logs to stderr.')
@click.pass_context
def cli(ctx, debug):
    # type: (click.Context, bool) -> None
    ctx.obj = {'debug': debug}
    _configure_logging(debug)


@cli.command()
@click.option('--config', 'config_file',
              type=click.Path(exists=True, dir_okay=False),
              help='JSON config file with a "watch" section.')
@click.option('--no-watch', is_flag=True, default=False,
              help='Disable watching; no change events are reported.')
@click.option('--extension', '-e', 'extensions', multiple=True,
              help='File extension to report changes for. '
                   'Can be given multiple times.')
@click.option('--debounce', type=click.IntRange(min=0),
              help='Debounce throttle in milliseconds.')
@click.option('--timeout', type=float, default=None,
              help='Stop after this many seconds.')
@click.argument('paths', nargs=-1, required=True)
@click.pass_context
def watch(ctx, config_file, no_watch, extensions, debounce, timeout, paths):
    # type: (click.Context, Optional[str], bool, List[str], Optional[int], Optional[float], List[str]) -> None  # noqa
    try:
        config = _build_config(config_file, no_watch, extensions, debounce)
    except ConfigError as e:
        click.echo(str(e), err=True)
        raise click.exceptions.Exit(1)
    loop = EventLoop()
    with create_watcher(loop.create_channel(), config) as watcher:
        for path in paths:
            try:
                watcher.watch(path)
            except WatcherError as e:
                click.echo(str(e), err=True)
                raise click.exceptions.Exit(1)
        try:
            loop.run(EchoEventHandler(), timeout=timeout)
        except KeyboardInterrupt:
            pass


def main():
    # type: () -> int
    try:
        rc = cli.main(obj={}, standalone_mode=False)
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except click.Abort:
        click.echo('Aborted!', err=True)
        return 1
    except Exception:
        click.echo(traceback.format_exc(), err=True)
        return 2
    return rc or 0


if __name__ == '__main__':
    sys.exit(main())
