"""MySQL dumper backed by ``mysqldump``."""

from pathlib import Path

from sqlalchemy.engine import URL, make_url

from db_backup.dumpers._process import run_dump_command


class MySQLDumper:
    """``DatabaseDumper`` for MySQL/MariaDB servers.

    The password is passed in ``MYSQL_PWD``; everything else comes from
    the connection URL.
    """

    def __init__(
        self,
        url: str | URL,
        mysqldump: str = "mysqldump",
        extra_args: list[str] | None = None,
    ) -> None:
        self.url = make_url(url)
        self.mysqldump = mysqldump
        self.extra_args = extra_args or []

    def build_command(self, database: str, output_path: Path) -> list[str]:
        command = [
            self.mysqldump,
            f"--result-file={output_path}",
            "--single-transaction",
            "--routines",
        ]
        if self.url.host:
            command.append(f"--host={self.url.host}")
        if self.url.port:
            command.append(f"--port={self.url.port}")
        if self.url.username:
            command.append(f"--user={self.url.username}")
        command += self.extra_args
        command.append(database)
        return command

    async def dump(self, database: str, output_path: Path) -> bool:
        env = {"MYSQL_PWD": self.url.password} if self.url.password else None
        return await run_dump_command(self.build_command(database, output_path), env)
