from html import escape

from rest_framework import serializers

from authentication.models import CustomUser

def validate_username(value):
    restricted_words = ['admin', 'mobibudget']
    if any(word in value.lower() for word in restricted_words):
        raise serializers.ValidationError("Invalid username. Cannot use this username.")
    return value


class RegisterSerializer(serializers.ModelSerializer):
    username = serializers.CharField(validators=[validate_username])
    password = serializers.CharField(write_only=True, min_length=8)
    password2 = serializers.CharField(write_only=True)

    class Meta:
        model = CustomUser
        fields = ['username', 'email', 'full_name', 'password', 'password2']

    def validate(self, attrs):
        if attrs['password'] != attrs['password2']:
            raise serializers.ValidationError({'password': 'Passwords do not match'})

        attrs['full_name'] = escape(attrs.get('full_name', ''))

        return attrs

    def create(self, validated_data):
        validated_data.pop('password2')
        user = CustomUser.objects.create_user(**validated_data)
        return user

class LoginSerializer(serializers.Serializer):
    username_or_email = serializers.CharField()
    password = serializers.CharField(write_only=True)

    def validate(self, attrs):
        username_or_email = attrs.get('username_or_email')
        password = attrs.get('password')

        user = CustomUser.objects.filter(username=username_or_email).first() or \
               CustomUser.objects.filter(email=username_or_email).first()

        if user and user.is_active and user.check_password(password):
            attrs['user'] = user
            return attrs

        raise serializers.ValidationError('Invalid credentials')

class UserSerializer(serializers.ModelSerializer):
    date_joined = serializers.DateTimeField(format='%d-%m-%Y %H:%M:%S')
    last_login = serializers.DateTimeField(format='%d-%m-%Y %H:%M:%S', allow_null=True)

    class Meta:
        model = CustomUser
        fields = ['id', 'username', 'email', 'full_name', 'date_joined', 'last_login']
