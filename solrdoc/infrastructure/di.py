"""Dependency injection provider for the mapper, sink and indexing service."""

from dishka import Provider, Scope, from_context, provide

from solrdoc.config import Config, IndexingConfig, MapperConfig, RecordBackend, SolrConfig
from solrdoc.domain.document.port.record import (
    AssociationResolver,
    RecordAccessor,
    RecordIdentity,
)
from solrdoc.domain.document.port.sink import SubmissionSink
from solrdoc.domain.document.service.indexing import IndexingService
from solrdoc.domain.document.service.mapper import DocumentMapper
from solrdoc.infrastructure.record.accessor import ConventionAccessor
from solrdoc.infrastructure.record.orm import SqlAlchemyAssociationResolver, SqlAlchemyIdentity
from solrdoc.infrastructure.record.plain import AttributeAssociationResolver, AttributeIdentity
from solrdoc.infrastructure.sink.solr import SolrSink


class DocumentProvider(Provider):
    """Provides record adapters, the document mapper and the Solr sink."""

    config = from_context(provides=Config, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_mapper_config(self, config: Config) -> MapperConfig:
        return config.mapper

    @provide(scope=Scope.APP)
    def get_indexing_config(self, config: Config) -> IndexingConfig:
        return config.indexing

    @provide(scope=Scope.APP)
    def get_solr_config(self, config: Config) -> SolrConfig:
        return config.solr

    @provide(scope=Scope.APP)
    def get_identity(self, config: MapperConfig) -> RecordIdentity:
        if config.backend == RecordBackend.ATTRIBUTE:
            return AttributeIdentity(config.identity_attribute)
        return SqlAlchemyIdentity()

    @provide(scope=Scope.APP)
    def get_association_resolver(self, config: MapperConfig) -> AssociationResolver:
        if config.backend == RecordBackend.ATTRIBUTE:
            return AttributeAssociationResolver()
        return SqlAlchemyAssociationResolver()

    @provide(scope=Scope.APP)
    def get_accessor(self, config: MapperConfig) -> RecordAccessor:
        return ConventionAccessor(config.accessor_suffix)

    @provide(scope=Scope.APP)
    def get_mapper(
        self,
        identity: RecordIdentity,
        accessor: RecordAccessor,
        associations: AssociationResolver,
        config: MapperConfig,
    ) -> DocumentMapper:
        return DocumentMapper(
            identity=identity,
            accessor=accessor,
            associations=associations,
            config=config,
        )

    @provide(scope=Scope.APP)
    def get_sink(self, config: SolrConfig) -> SubmissionSink:
        return SolrSink(config)

    @provide(scope=Scope.APP)
    def get_indexing_service(
        self, mapper: DocumentMapper, sink: SubmissionSink, config: IndexingConfig
    ) -> IndexingService:
        return IndexingService(mapper=mapper, sink=sink, config=config)
