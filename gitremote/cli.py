"""
Command-line interface for open-git-remote-url
"""

import sys
import argparse
from typing import Optional, List

from . import __version__
from .config import Config
from .environment import EnvironmentDescriptor, capture_environment
from .exceptions import GitRemoteException, NoOpenerAvailableException
from .git import get_remote_url
from .logger import get_logger
from .opener import open_url
from .terminal import Terminal, hyperlinks_enabled, render_link


STATUS_PREFIX = "Open Git Remote URL : "
NOT_FOUND_MESSAGE = STATUS_PREFIX + "Cannot Find Git Remote URL"


class CLI:
    """Command-line interface handler"""

    def __init__(self, config: Optional[Config] = None,
                 env: Optional[EnvironmentDescriptor] = None):
        self.config = config or Config()
        self._env = env

    @property
    def env(self) -> EnvironmentDescriptor:
        """Environment snapshot, captured on first use"""
        if self._env is None:
            self._env = capture_environment()
        return self._env

    def run(self, args: Optional[List[str]] = None) -> int:
        """Run CLI with arguments"""
        parser = self._create_parser()

        if args is None:
            args = sys.argv[1:]

        parsed_args = parser.parse_args(args)

        try:
            return self.cmd_open(parsed_args)
        except GitRemoteException as e:
            print(Terminal.error(f"Error: {e}"), file=sys.stderr)
            return 1
        except KeyboardInterrupt:
            print("\nAborted", file=sys.stderr)
            return 130

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser"""
        parser = argparse.ArgumentParser(
            prog='open-git-remote-url',
            description='Print the git remote URL as a terminal link and open it',
        )

        parser.add_argument('--version', action='version',
                            version=f'open-git-remote-url v{__version__}')
        parser.add_argument('--show-only', '-s', action='store_true',
                            help='Print the URL without opening it')
        parser.add_argument('--link', choices=['auto', 'never', 'always'],
                            help='Hyperlink output mode')
        parser.add_argument('--color', choices=['auto', 'never', 'always'],
                            help='Color output mode')
        parser.add_argument('-C', dest='directory', metavar='PATH',
                            help='Run as if started in PATH')

        return parser

    def cmd_open(self, args) -> int:
        """Print the remote URL and open it unless --show-only"""
        logger = get_logger()

        Terminal.set_color_mode(
            Terminal.parse_color_mode(args.color or self.config.get_color_mode()))
        link_mode = Terminal.parse_link_mode(args.link or self.config.get_link_mode())

        url = get_remote_url(args.directory)
        if url is None:
            print(NOT_FOUND_MESSAGE)
            return 1

        env = self.env
        logger.verbose("Remote URL %s", url)

        print(STATUS_PREFIX + render_link(url, url, hyperlinks_enabled(link_mode, env)))

        if args.show_only:
            return 0

        try:
            open_url(url, env)
        except NoOpenerAvailableException as e:
            print(Terminal.error(str(e)), file=sys.stderr)
            return 1

        return 0


def main():
    """Main entry point"""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == '__main__':
    main()
