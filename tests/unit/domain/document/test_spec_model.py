from solrdoc.domain.document.model.field_type import FieldType, RawSuffix
from solrdoc.domain.document.model.spec import AssociationSpec, FieldSpec, IndexingSpec


class TestFieldSpec:
    def test_defaults(self):
        spec = FieldSpec(name="title")
        assert spec.type == FieldType.TEXT
        assert spec.boost is None
        assert spec.index_name == "title"

    def test_alias(self):
        assert FieldSpec(name="title", stored_as="headline").index_name == "headline"

    def test_type_forms(self):
        assert FieldSpec(name="a", type="integer").type == "integer"
        assert FieldSpec(name="a", type=RawSuffix("sm")).type == RawSuffix("sm")


class TestAssociationSpec:
    def test_default_name_is_singular(self):
        assert AssociationSpec(name="comments").index_name == "comment"
        assert AssociationSpec(name="categories").index_name == "category"

    def test_singular_name_is_kept(self):
        assert AssociationSpec(name="author").index_name == "author"

    def test_alias_wins(self):
        assert AssociationSpec(name="comments", stored_as="remarks").index_name == "remarks"

    def test_callable_using(self):
        spec = AssociationSpec(name="author", using=lambda a: a.name)
        assert callable(spec.using)


class TestIndexingSpec:
    def test_defaults(self):
        spec = IndexingSpec()
        assert spec.if_ is True
        assert spec.offline is False
        assert spec.auto_commit is True
        assert not (spec.dynamic_attributes or spec.taggable or spec.spatial)

    def test_if_alias(self):
        spec = IndexingSpec.model_validate({"if": "published"})
        assert spec.if_ == "published"

    def test_type_name_defaults_to_class_name(self):
        class Article:
            pass

        assert IndexingSpec().type_name_for(Article()) == "Article"
        assert IndexingSpec(type_name="Post").type_name_for(Article()) == "Post"
