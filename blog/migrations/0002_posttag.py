import django.db.models.deletion
from django.db import migrations, models


def backfill_tag_rows(apps, schema_editor):
    Post = apps.get_model("blog", "Post")
    PostTag = apps.get_model("blog", "PostTag")
    rows = [
        PostTag(post_id=post_id, name=name, position=position)
        for post_id, tags in Post.objects.values_list("id", "tags")
        for position, name in enumerate(tags or [])
    ]
    PostTag.objects.bulk_create(rows, batch_size=500)


class Migration(migrations.Migration):

    dependencies = [
        ("blog", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="PostTag",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=30)),
                ("position", models.PositiveSmallIntegerField()),
                ("post", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="post_tags",
                    to="blog.post",
                )),
            ],
            options={
                "ordering": ["position"],
                "indexes": [models.Index(fields=["name"], name="blog_postta_name_6b2d90_idx")],
                "constraints": [
                    models.UniqueConstraint(fields=("post", "position"), name="blog_posttag_post_position_uniq"),
                ],
            },
        ),
        migrations.RunPython(backfill_tag_rows, migrations.RunPython.noop),
    ]
