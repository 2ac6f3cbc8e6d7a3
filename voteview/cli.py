"""
Command line entry points for Voteview searches.
"""

import logging
from typing import Optional, Tuple

import click

from voteview.etl.client import VoteviewClient
from voteview.etl.member_search import member_search
from voteview.etl.rollcall_search import get_query_string, voteview_search
from voteview.utils.exceptions import VoteviewError

logger = logging.getLogger(__name__)


def _emit(df, output: Optional[str]):
    if output:
        df.to_csv(output, index=False)
        logger.info(f"Wrote {len(df)} rows to {output}")
    else:
        click.echo(df.to_string(index=False))


@click.group()
@click.option('--base-url', envvar='VOTEVIEW_BASE_URL', help='Voteview server root')
@click.option('--timeout', type=float, help='Request timeout in seconds')
@click.pass_context
def main(ctx, base_url: Optional[str], timeout: Optional[float]):
    """Search the Voteview roll call and member database."""
    logging.basicConfig(level=logging.INFO)
    ctx.obj = VoteviewClient(base_url=base_url, timeout=timeout)


@main.command()
@click.argument('q', required=False)
@click.option('--startdate', help='Earliest date (yyyy, yyyy-mm or yyyy-mm-dd)')
@click.option('--enddate', help='Latest date (yyyy, yyyy-mm or yyyy-mm-dd)')
@click.option('--congress', type=int, multiple=True, help='Congress number; repeat for several')
@click.option('--chamber', type=click.Choice(['house', 'senate'], case_sensitive=False), help='Chamber')
@click.option('--minsupport', type=float, help='Minimum support (0-100)')
@click.option('--maxsupport', type=float, help='Maximum support (0-100)')
@click.option('--output', type=str, help='Write results to this CSV file')
@click.pass_obj
def search(client: VoteviewClient, q: Optional[str], startdate: Optional[str], enddate: Optional[str],
           congress: Tuple[int, ...], chamber: Optional[str], minsupport: Optional[float],
           maxsupport: Optional[float], output: Optional[str]):
    """Search roll calls."""
    try:
        df = voteview_search(
            q,
            startdate=startdate,
            enddate=enddate,
            chamber=chamber,
            congress=list(congress) or None,
            maxsupport=maxsupport,
            minsupport=minsupport,
            client=client
        )
    except VoteviewError as e:
        raise click.ClickException(str(e))

    click.echo(f"Query string: {get_query_string(df)}")
    _emit(df, output)


@main.command()
@click.option('--name', help='Member name')
@click.option('--icpsr', type=int, help='ICPSR number')
@click.option('--state', help='State abbreviation')
@click.option('--congress', type=int, help='Congress number')
@click.option('--cqlabel', help="CQ label, e.g. '(TX-10)'")
@click.option('--chamber', help='House or Senate')
@click.option('--output', type=str, help='Write results to this CSV file')
@click.pass_obj
def members(client: VoteviewClient, name: Optional[str], icpsr: Optional[int], state: Optional[str],
            congress: Optional[int], cqlabel: Optional[str], chamber: Optional[str], output: Optional[str]):
    """Search members of Congress."""
    try:
        df = member_search(
            name=name,
            icpsr=icpsr,
            state=state,
            congress=congress,
            cqlabel=cqlabel,
            chamber=chamber,
            client=client
        )
    except (VoteviewError, ValueError) as e:
        raise click.ClickException(str(e))

    _emit(df, output)


if __name__ == '__main__':
    main()
