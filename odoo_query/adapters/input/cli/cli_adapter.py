"""CLI adapter for interacting with the query service."""
from __future__ import annotations

import json
from typing import Any, Mapping, Optional, Tuple

import click

from odoo_query.application.commands.query_command import QueryCommand
from odoo_query.common.config import Settings
from odoo_query.domain.exceptions import OdooQueryError
from odoo_query.domain.value_objects.connection_config import ConnectionConfig
from odoo_query.domain.value_objects.operation import FetchType, Operation
from odoo_query.ports.input.query_service import QueryService
from odoo_query.ports.input.result_presenter import ResultPresenter


class JsonParamType(click.ParamType):
  """Option value given as a JSON document."""
  name = 'json'

  def __init__(self, expected: type):
    self._expected = expected

  def convert(self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]) -> Any:
    if isinstance(value, self._expected):
      return value
    try:
      decoded = json.loads(value)
    except ValueError as e:
      self.fail(f'{value!r} is not valid JSON: {e}', param, ctx)
    if not isinstance(decoded, self._expected):
      self.fail(f'expected a JSON {self._expected.__name__}, got: {value}', param, ctx)
    return decoded


class CLIAdapter:
  def __init__(
    self,
    query_service: QueryService,
    presenters: Mapping[str, ResultPresenter],
    settings: Optional[Settings] = None,
  ):
    self._query_service = query_service
    self._presenters = dict(presenters)
    self._settings = settings or Settings()

  def run(self) -> None:
    self.build_cli()()

  def build_cli(self) -> click.Group:
    settings = self._settings

    @click.group()
    @click.option(
      '--format', 'output_format',
      type=click.Choice(sorted(self._presenters)),
      default=next(iter(self._presenters)),
      show_default=True,
      help='Output format',
    )
    @click.pass_context
    def cli(ctx: click.Context, output_format: str) -> None:
      """Query Odoo models over XML-RPC."""
      ctx.obj = self._presenters[output_format]

    def connection_options(func):
      func = click.option('--password', default=settings.odoo_password, help='Odoo password or API key [env: ODOO_PASSWORD]')(func)
      func = click.option('--username', default=settings.odoo_username, help='Odoo login [env: ODOO_USERNAME]')(func)
      func = click.option('--db', default=settings.odoo_db, help='Odoo database name [env: ODOO_DB]')(func)
      func = click.option('--url', default=settings.odoo_url, help='Base URL of the Odoo server [env: ODOO_URL]')(func)
      return func

    @cli.command('query')
    @connection_options
    @click.option('--model', required=True, help="Odoo model, e.g. 'res.partner'")
    @click.option(
      '--operation',
      type=click.Choice([operation.value for operation in Operation]),
      default=Operation.SEARCH_READ.value,
      show_default=True,
    )
    @click.option('--filters', type=JsonParamType(list), default=None,
                  help='Domain as JSON, e.g. \'[["is_company", "=", true]]\'')
    @click.option('--field', 'fields', multiple=True, help='Field to return (repeatable)')
    @click.option('--values', type=JsonParamType(dict), default=None,
                  help='Field values for create/write as a JSON object')
    @click.option('--id', 'ids', multiple=True, type=int, help='Record id (repeatable)')
    @click.option('--limit', type=click.IntRange(min=0), default=None)
    @click.option('--offset', type=click.IntRange(min=0), default=None)
    @click.option(
      '--fetch-type',
      type=click.Choice([fetch_type.value for fetch_type in FetchType]),
      default=FetchType.FETCH.value,
      show_default=True,
    )
    @click.pass_obj
    def query(
      presenter: ResultPresenter,
      url: Optional[str],
      db: Optional[str],
      username: Optional[str],
      password: Optional[str],
      model: str,
      operation: str,
      filters: Optional[list],
      fields: Tuple[str, ...],
      values: Optional[dict],
      ids: Tuple[int, ...],
      limit: Optional[int],
      offset: Optional[int],
      fetch_type: str,
    ) -> None:
      """Run one operation on an Odoo model."""
      try:
        command = QueryCommand(
          url=url or '',
          db=db or '',
          username=username or '',
          password=password or '',
          model=model,
          operation=operation,
          filters=filters,
          fields=fields or None,
          values=values,
          ids=ids or None,
          limit=limit,
          offset=offset,
          fetch_type=fetch_type,
        )
        output = self._query_service.execute(command)
      except OdooQueryError as exc:
        click.echo(presenter.present_error(exc), err=True)
        raise SystemExit(1)
      click.echo(presenter.present(output))

    @cli.command('version')
    @connection_options
    @click.pass_obj
    def version(
      presenter: ResultPresenter,
      url: Optional[str],
      db: Optional[str],
      username: Optional[str],
      password: Optional[str],
    ) -> None:
      """Show the Odoo server version information."""
      try:
        connection = ConnectionConfig(url=url or '', db=db or '', username=username or '', password=password or '')
        info = self._query_service.server_version(connection)
      except OdooQueryError as exc:
        click.echo(presenter.present_error(exc), err=True)
        raise SystemExit(1)
      click.echo(json.dumps(info, ensure_ascii=False, indent=2, default=str))

    return cli
