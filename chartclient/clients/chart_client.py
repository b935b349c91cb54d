"""
Chart Client for chartclient.

Resolves a chart's form data and fans out the dependent loads:

    load_form_data ──► ┬─ load_annotations ─┐
                       ├─ load_datasource  ─┼──► ChartData
                       └─ load_query_data  ─┘

Form data resolution always completes first. The three dependent loads run
concurrently; the first failure among them fails the whole call and no
partial aggregate is returned.

Usage:
    client = ChartClient()
    chart = await client.load_chart_data(SliceIdAndOrFormData(slice_id=42))
    chart.query_data
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Mapping, Sequence

from pydantic import BaseModel

from chartclient.clients.errors import (
    AnnotationNotImplementedError,
    InvalidInputError,
    UnknownChartTypeError,
)
from chartclient.connection.base import RequestConfig, Transport
from chartclient.connection.client import get_superset_client
from chartclient.query.form_data import (
    AnnotationData,
    AnnotationLayerMetadata,
    ChartData,
    FormData,
    SliceIdAndOrFormData,
)
from chartclient.registries.annotation_sources import (
    AnnotationSourceRegistry,
    get_annotation_source_registry,
)
from chartclient.registries.build_query import (
    ChartBuildQueryRegistry,
    get_chart_build_query_registry,
)

logger = logging.getLogger(__name__)

RequestOptions = Mapping[str, Any]

FORM_DATA_ENDPOINT = "/api/v1/formData/?slice_id={slice_id}"
QUERY_ENDPOINT = "/api/v1/query/"
DATASOURCE_ENDPOINT = "/superset/fetch_datasource_metadata?datasourceKey={datasource_key}"


class ChartClient:
    """
    Loads everything needed to render a chart.

    Holds no per-call state: every `load_chart_data` call is an independent
    pipeline and concurrent calls share only the read-only registries.
    """

    def __init__(
        self,
        client: Transport | None = None,
        *,
        build_query_registry: ChartBuildQueryRegistry | None = None,
        annotation_source_registry: AnnotationSourceRegistry | None = None,
    ):
        """
        Initialize the chart client.

        Args:
            client: Transport for HTTP calls (defaults to the global SupersetClient)
            build_query_registry: Builder lookup (defaults to the global registry)
            annotation_source_registry: Annotation loaders (defaults to the global registry)
        """
        self.client = client if client is not None else get_superset_client()
        self._build_query_registry = build_query_registry
        self._annotation_source_registry = annotation_source_registry

    @property
    def build_query_registry(self) -> ChartBuildQueryRegistry:
        if self._build_query_registry is not None:
            return self._build_query_registry
        return get_chart_build_query_registry()

    @property
    def annotation_source_registry(self) -> AnnotationSourceRegistry:
        if self._annotation_source_registry is not None:
            return self._annotation_source_registry
        return get_annotation_source_registry()

    # =========================================================================
    # Form data
    # =========================================================================

    async def load_form_data(
        self,
        input: SliceIdAndOrFormData | Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> FormData:
        """
        Resolve the form data for a chart.

        With a slice id, the stored form data is fetched and any given form
        data is applied on top of it as an override.

        Raises:
            InvalidInputError: If neither slice id nor form data is given
            TransportError: If fetching the stored form data fails
        """
        if not isinstance(input, SliceIdAndOrFormData):
            input = SliceIdAndOrFormData.from_dict(input)

        if input.has_slice_id:
            response = await self.client.get(
                RequestConfig.build(FORM_DATA_ENDPOINT.format(slice_id=input.slice_id), options)
            )
            stored = FormData.model_validate(response.json["form_data"])
            logger.debug(f"[chart] Loaded stored form data for slice {input.slice_id}")
            return stored.merged_with(input.form_data)

        if input.form_data is None:
            raise InvalidInputError("At least one of slice_id or form_data must be specified")

        if isinstance(input.form_data, FormData):
            return input.form_data
        return FormData.model_validate(input.form_data)

    # =========================================================================
    # Query data
    # =========================================================================

    async def load_query_data(
        self,
        form_data: FormData,
        options: RequestOptions | None = None,
    ) -> Any:
        """
        Build the query context for the chart and run it.

        Raises:
            UnknownChartTypeError: If no builder is registered for `viz_type`
            TransportError: If the query request fails
        """
        build_query = self.build_query_registry.get(form_data.viz_type)
        if build_query is None:
            raise UnknownChartTypeError(form_data.viz_type)

        query_context = build_query(form_data)
        if inspect.isawaitable(query_context):
            query_context = await query_context
        if isinstance(query_context, BaseModel):
            query_context = query_context.model_dump(mode="json", by_alias=True)

        response = await self.client.post(
            RequestConfig.build(
                QUERY_ENDPOINT,
                options,
                post_payload={"query_context": query_context},
            )
        )
        return response.json

    # =========================================================================
    # Datasource
    # =========================================================================

    async def load_datasource(
        self,
        datasource_key: str | None,
        options: RequestOptions | None = None,
    ) -> Any:
        """Fetch metadata for a datasource key such as `3__table`."""
        response = await self.client.get(
            RequestConfig.build(DATASOURCE_ENDPOINT.format(datasource_key=datasource_key), options)
        )
        return response.json

    # =========================================================================
    # Annotations
    # =========================================================================

    async def load_annotation(
        self,
        layer: AnnotationLayerMetadata,
        options: RequestOptions | None = None,
    ) -> Any:
        """
        Resolve the data for a single annotation layer.

        Raises:
            AnnotationNotImplementedError: If the layer's source type has no loader
        """
        # No query needed
        if layer.source_type is None:
            return {}

        loader = self.annotation_source_registry.get(layer.source_type)
        if loader is None:
            raise AnnotationNotImplementedError(layer.source_type)

        return await loader(layer, self.client, options)

    async def load_annotations(
        self,
        layers: Sequence[AnnotationLayerMetadata] | None = None,
        options: RequestOptions | None = None,
    ) -> AnnotationData:
        """
        Resolve all annotation layers concurrently into a name-keyed mapping.

        Layers sharing a name overwrite each other. The first failing layer
        fails the whole mapping; later failures from sibling layers are
        discarded, not raised.
        """
        if not layers:
            return {}

        results = await asyncio.gather(
            *(self.load_annotation(layer, options) for layer in layers)
        )
        return {layer.name: result for layer, result in zip(layers, results)}

    # =========================================================================
    # Chart data
    # =========================================================================

    async def load_chart_data(
        self,
        input: SliceIdAndOrFormData | Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> ChartData:
        """
        Load form data, datasource, query data and annotations for a chart.

        Args:
            input: Slice id and/or form data
            options: Per-call request options forwarded to every request

        Returns:
            The complete chart aggregate

        Only the first failure among the three loads is raised; results and
        errors from the other branches are discarded.
        """
        form_data = await self.load_form_data(input, options)
        logger.debug(
            f"[chart] Loading {form_data.viz_type} chart on datasource {form_data.datasource}"
        )

        annotation_data, datasource, query_data = await asyncio.gather(
            self.load_annotations(form_data.annotation_layers, options),
            self.load_datasource(form_data.datasource, options),
            self.load_query_data(form_data, options),
        )

        return ChartData(
            form_data=form_data,
            datasource=datasource,
            query_data=query_data,
            annotation_data=annotation_data,
        )
