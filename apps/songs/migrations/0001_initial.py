import django.db.models.deletion
import django.utils.timezone
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Song',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('nickname', models.CharField(blank=True, max_length=50)),
                ('genre', models.CharField(blank=True, choices=[('ballad', 'Ballad'), ('hiphop', 'Hip-hop'), ('dance', 'Dance'), ('indie', 'Indie'), ('rock', 'Rock'), ('trot', 'Trot'), ('gugak', 'Gugak')], max_length=20)),
                ('audio_url', models.URLField(blank=True, max_length=500)),
                ('image_url', models.URLField(blank=True, max_length=500)),
                ('is_pending', models.BooleanField(default=True)),
                ('is_visible', models.BooleanField(default=False)),
                ('is_deleted', models.BooleanField(default=False)),
                ('likes_count', models.IntegerField(default=0)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='songs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['is_pending', 'is_visible', 'is_deleted'], name='songs_status_flags_idx'),
                    models.Index(fields=['genre'], name='songs_genre_idx'),
                ],
            },
        ),
    ]
