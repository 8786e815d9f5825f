# User-facing strings (pt-BR).

LOGIN_REQUIRED_FIELDS = "Preencha e-mail e senha."
LOGIN_SUCCESS = "Login realizado com sucesso!"
LOGIN_ERROR = "Erro ao fazer login. Verifique suas credenciais."
LOGOUT_ERROR = "Erro ao fazer logout"

REGISTER_REQUIRED_FIELDS = "Preencha todos os campos."
REGISTER_PASSWORD_MISMATCH = "As senhas não coincidem."
REGISTER_WEAK_PASSWORD = "A senha deve ter pelo menos 6 caracteres."
REGISTER_EMAIL_EXISTS = "Este e-mail já está em uso."
REGISTER_SUCCESS = "Conta criada com sucesso!"
REGISTER_ERROR = "Erro ao criar conta. Tente novamente."

CLIENTS_LOAD_ERROR = "Erro ao carregar clientes"
CLIENT_CREATED = "Cliente cadastrado com sucesso!"
CLIENT_CREATE_ERROR = "Erro ao cadastrar cliente"
CLIENT_UPDATED = "Cliente atualizado com sucesso!"
CLIENT_UPDATE_ERROR = "Erro ao atualizar cliente"
CLIENT_DELETED = "Cliente excluído com sucesso!"
CLIENT_DELETE_ERROR = "Erro ao excluir cliente"
CLIENT_NOT_FOUND = "Cliente não encontrado"
CLIENT_DELETE_CONFIRM = "Tem certeza que deseja excluir este cliente?"

FIELD_REQUIRED = "O campo {field} é obrigatório."
EMAIL_INVALID = "Informe um e-mail válido."

MIN_PASSWORD_LENGTH = 6
