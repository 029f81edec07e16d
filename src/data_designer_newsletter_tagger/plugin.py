from data_designer.plugins.plugin import Plugin, PluginType

newsletter_tagger_plugin = Plugin(
    config_qualified_name="data_designer_newsletter_tagger.config.NewsletterTaggerColumnConfig",
    impl_qualified_name="data_designer_newsletter_tagger.generator.NewsletterTaggerColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
