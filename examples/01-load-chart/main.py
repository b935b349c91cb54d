"""
Load Chart Example

This example demonstrates loading a chart end to end:
1. Register a query builder for a chart type
2. Point the client at a Superset instance
3. Load form data, datasource, query data and annotations in one call

Run: CHARTCLIENT_BASE_URL=http://localhost:8088 python -m examples.01-load-chart.main
"""

import asyncio
import logging

from chartclient import ChartClient, FormData, SliceIdAndOrFormData
from chartclient.connection import get_superset_client
from chartclient.registries import get_chart_build_query_registry

# =============================================================================
# Query Builders
# =============================================================================


def build_table_query(form_data: FormData) -> dict:
    """Turn table form data into a query context."""
    return {
        "datasource": form_data.datasource,
        "queries": [
            {
                "columns": form_data.extra.get("groupby", []),
                "metrics": form_data.extra.get("metrics", ["count"]),
                "row_limit": form_data.extra.get("row_limit", 100),
            }
        ],
    }


# =============================================================================
# Main
# =============================================================================


async def main():
    logging.basicConfig(level=logging.DEBUG)

    get_chart_build_query_registry().register("table", build_table_query)

    client = ChartClient()
    try:
        chart = await client.load_chart_data(
            SliceIdAndOrFormData(
                form_data={
                    "viz_type": "table",
                    "datasource": "1__table",
                    "groupby": ["country"],
                    "annotation_layers": [{"name": "threshold"}],
                }
            )
        )
    finally:
        await get_superset_client().close()

    print(f"Chart type: {chart.form_data.viz_type}")
    print(f"Annotations: {list(chart.annotation_data)}")
    print(f"Query data: {chart.query_data}")


if __name__ == "__main__":
    asyncio.run(main())
