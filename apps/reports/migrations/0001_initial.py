import django.db.models.deletion
import django.utils.timezone
import uuid
from django.conf import settings
from django.db import migrations, models


REPORT_TYPES = [('post', 'Post Report'), ('comment', 'Comment Report'), ('song', 'Song Report')]


def report_fields():
    return [
        ('report_type', models.CharField(choices=REPORT_TYPES, max_length=20)),
        ('target_id', models.CharField(max_length=100)),
        ('post_id', models.CharField(blank=True, max_length=100)),
        ('song_id', models.CharField(blank=True, max_length=100)),
        ('parent_comment_id', models.CharField(blank=True, max_length=100)),
        ('board_owner_id', models.CharField(blank=True, max_length=100)),
        ('reporter_nickname', models.CharField(blank=True, max_length=50)),
        ('reported_user_nickname', models.CharField(blank=True, max_length=50)),
        ('reason', models.TextField()),
        ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
        ('content_snapshot', models.TextField(blank=True)),
        ('image_snapshot', models.URLField(blank=True, max_length=500)),
        ('nickname_snapshot', models.CharField(blank=True, max_length=50)),
        ('reporter', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
        ('reported_user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Report',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                *report_fields(),
            ],
            options={
                'ordering': ['created_at'],
                'indexes': [
                    models.Index(fields=['report_type', 'created_at'], name='reports_type_created_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='GuiltyReport',
            fields=[
                ('id', models.UUIDField(editable=False, primary_key=True, serialize=False)),
                *report_fields(),
                ('adjudicated_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('suspension', models.CharField(blank=True, max_length=20)),
                ('adjudicated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='guilty_verdicts', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-adjudicated_at'],
                'indexes': [
                    models.Index(fields=['report_type', '-adjudicated_at'], name='reports_guilty_type_idx'),
                ],
            },
        ),
    ]
